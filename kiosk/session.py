"""In-progress order: order type, cart, loyalty and placement."""

from __future__ import annotations

import logging
import random

from kiosk.cart import Cart
from kiosk.checkout import compute
from kiosk.config import ORDER_NUMBER_RANGE
from kiosk.loyalty import LoyaltyAccount
from kiosk.models import CheckoutTotals, Confirmation, OrderStage, OrderType

logger = logging.getLogger(__name__)


class OrderSession:
    """
    Coordinates one order from browsing through placement.

    Stages move BROWSING -> CHECKOUT -> PLACED. The cart and loyalty account
    outlive individual orders; reset() starts a fresh order after confirmation.
    """

    def __init__(
        self,
        cart: Cart | None = None,
        loyalty: LoyaltyAccount | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.cart = cart if cart is not None else Cart()
        self.loyalty = loyalty if loyalty is not None else LoyaltyAccount()
        self._rng = rng or random.Random()
        self.stage = OrderStage.BROWSING
        self.order_type = OrderType.DINE_IN
        self.redeem_requested = False
        self.last_confirmation: Confirmation | None = None

    @property
    def redeem_effective(self) -> bool:
        return self.redeem_requested and self.loyalty.can_redeem()

    def choose_order_type(self, order_type: OrderType) -> None:
        self.order_type = order_type
        logger.info(f"Order type set to {order_type.value}")

    def set_redeem(self, flag: bool) -> None:
        """Toggle the redemption preview; points only move when the order is placed."""
        self.redeem_requested = flag

    def totals(self) -> CheckoutTotals:
        return compute(self.cart.subtotal(), self.redeem_requested, self.loyalty.points)

    def begin_checkout(self) -> bool:
        if self.cart.is_empty():
            logger.info("Checkout ignored: cart is empty")
            return False
        self.stage = OrderStage.CHECKOUT
        return True

    def leave_checkout(self) -> None:
        if self.stage is OrderStage.CHECKOUT:
            self.stage = OrderStage.BROWSING

    def place_order(self) -> Confirmation | None:
        """Commit the order; returns None (no-op) unless checking out a non-empty cart."""
        if self.stage is not OrderStage.CHECKOUT or self.cart.is_empty():
            logger.info(f"Place order ignored: stage={self.stage.value} lines={len(self.cart)}")
            return None

        # Price against the pre-redemption balance, then commit points.
        totals = self.totals()
        redeemed = self.loyalty.redeem(self.redeem_requested)
        earned = self.loyalty.earn(totals.total)
        order_number = self._rng.randint(*ORDER_NUMBER_RANGE)
        self.cart.clear()
        self.stage = OrderStage.PLACED

        self.last_confirmation = Confirmation(
            order_number=order_number,
            order_type=self.order_type,
            totals=totals,
            points_redeemed=redeemed,
            points_earned=earned,
            points_balance=self.loyalty.points,
        )
        logger.info(
            f"Order #{order_number} placed: total ${totals.total} redeemed={redeemed} "
            f"earned={earned} balance={self.loyalty.points}"
        )
        return self.last_confirmation

    def reset(self) -> None:
        """Start a fresh order; loyalty points carry over."""
        self.stage = OrderStage.BROWSING
        self.order_type = OrderType.DINE_IN
        self.redeem_requested = False
        self.last_confirmation = None
