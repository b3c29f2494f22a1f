from __future__ import annotations

from decimal import Decimal

import pytest

from kiosk.loyalty import LoyaltyAccount


def test_new_account_starts_with_seed_points():
    assert LoyaltyAccount().points == 150


def test_negative_balance_rejected():
    with pytest.raises(ValueError):
        LoyaltyAccount(points=-1)


@pytest.mark.parametrize(
    ("amount", "earned"),
    [
        (Decimal("54.00"), 54),
        (Decimal("16.60"), 16),
        (Decimal("0.99"), 0),
        (Decimal("0.00"), 0),
    ],
)
def test_earn_floors_whole_units(amount, earned):
    account = LoyaltyAccount(points=0)

    assert account.earn(amount) == earned
    assert account.points == earned


def test_earn_rejects_negative_amount():
    with pytest.raises(ValueError):
        LoyaltyAccount().earn(Decimal("-0.01"))


def test_redeem_deducts_block_only_when_requested():
    account = LoyaltyAccount(points=150)

    assert account.redeem(False) == 0
    assert account.points == 150
    assert account.redeem(True) == 100
    assert account.points == 50


def test_redeem_is_noop_below_threshold():
    account = LoyaltyAccount(points=99)

    assert not account.can_redeem()
    assert account.redeem(True) == 0
    assert account.points == 99


def test_reward_tiers_mark_affordable_rows():
    tiers = LoyaltyAccount(points=250).reward_tiers()

    assert [(cost, ok) for cost, _reward, ok in tiers] == [
        (100, True),
        (200, True),
        (300, False),
        (500, False),
        (1000, False),
    ]
