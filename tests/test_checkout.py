from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kiosk.checkout import compute, round2


def test_tax_and_total_without_redemption():
    totals = compute(Decimal("50.00"), redeem_flag=False, balance=150)

    assert totals.subtotal == Decimal("50.00")
    assert totals.tax == Decimal("4.00")
    assert totals.discount == Decimal("0.00")
    assert totals.total == Decimal("54.00")
    assert not totals.discount_applied


def test_empty_cart_totals_zero():
    totals = compute(Decimal("0"), redeem_flag=True, balance=0)

    assert (totals.subtotal, totals.tax, totals.discount, totals.total) == (
        Decimal("0.00"),
        Decimal("0.00"),
        Decimal("0.00"),
        Decimal("0.00"),
    )


def test_redemption_discount_applies_with_enough_points():
    totals = compute(Decimal("20.00"), redeem_flag=True, balance=150)

    assert totals.tax == Decimal("1.60")
    assert totals.discount == Decimal("5.00")
    assert totals.total == Decimal("16.60")
    assert totals.discount_applied


def test_redemption_ignored_below_threshold():
    totals = compute(Decimal("20.00"), redeem_flag=True, balance=99)

    assert totals.discount == Decimal("0.00")
    assert totals.total == Decimal("21.60")


def test_total_is_clamped_at_zero():
    totals = compute(Decimal("2.00"), redeem_flag=True, balance=100)

    assert totals.discount == Decimal("5.00")
    assert totals.total == Decimal("0.00")


def test_tax_rounds_half_up():
    totals = compute(Decimal("0.50"), redeem_flag=False, balance=0, tax_rate=Decimal("0.05"))

    assert totals.tax == Decimal("0.03")


def test_negative_subtotal_rejected():
    with pytest.raises(ValueError):
        compute(Decimal("-1.00"), redeem_flag=False, balance=0)


def test_round2_quantizes_to_cents():
    assert round2(Decimal("1.005")) == Decimal("1.01")
    assert round2(Decimal("1.004")) == Decimal("1.00")


@given(
    cents=st.integers(min_value=0, max_value=1_000_000),
    redeem_flag=st.booleans(),
    balance=st.integers(min_value=0, max_value=2000),
)
def test_totals_are_consistent(cents, redeem_flag, balance):
    subtotal = Decimal(cents) / 100
    totals = compute(subtotal, redeem_flag, balance)

    for amount in (totals.subtotal, totals.tax, totals.discount, totals.total):
        assert amount.as_tuple().exponent == -2
    assert totals.total >= 0
    assert totals.discount in (Decimal("0.00"), Decimal("5.00"))
    assert totals.discount_applied == (redeem_flag and balance >= 100)
    unclamped = totals.subtotal + totals.tax - totals.discount
    if unclamped >= 0:
        assert totals.total == unclamped
    else:
        assert totals.total == Decimal("0.00")
