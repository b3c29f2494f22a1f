"""Checkout pricing: tax, loyalty discount and grand total."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from kiosk.config import LOYALTY_REDEEM_POINTS, LOYALTY_REDEEM_VALUE, TAX_RATE
from kiosk.models import CheckoutTotals

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def round2(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute(
    subtotal: Decimal | int | str,
    redeem_flag: bool,
    balance: int,
    tax_rate: Decimal = TAX_RATE,
) -> CheckoutTotals:
    """
    Price a cart subtotal.

    Every returned amount is a 2-dp Decimal. The discount only applies when
    the flag is set and the balance covers a redemption; the total is floored
    at zero, so an empty cart always totals 0.00.
    """
    amount = Decimal(str(subtotal))
    if amount < 0:
        raise ValueError("subtotal must be >= 0")

    subtotal_2dp = round2(amount)
    tax = round2(amount * tax_rate)
    discount = LOYALTY_REDEEM_VALUE if redeem_flag and balance >= LOYALTY_REDEEM_POINTS else ZERO
    total = max(ZERO, subtotal_2dp + tax - discount)
    return CheckoutTotals(subtotal=subtotal_2dp, tax=tax, discount=round2(discount), total=round2(total))
