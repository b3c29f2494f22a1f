"""Loyalty points account."""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal

from kiosk.config import LOYALTY_REDEEM_POINTS, LOYALTY_SEED_POINTS
from kiosk.constant import REWARD_TIERS

logger = logging.getLogger(__name__)


class LoyaltyAccount:
    """Integer point balance that never goes below zero."""

    def __init__(self, points: int = LOYALTY_SEED_POINTS) -> None:
        if points < 0:
            raise ValueError("points must be >= 0")
        self._points = points

    @property
    def points(self) -> int:
        return self._points

    def can_redeem(self) -> bool:
        return self._points >= LOYALTY_REDEEM_POINTS

    def earn(self, amount_spent: Decimal) -> int:
        """Credit one point per whole currency unit spent and return the points earned."""
        amount = Decimal(str(amount_spent))
        if amount < 0:
            raise ValueError("amount_spent must be >= 0")
        earned = int(amount.to_integral_value(rounding=ROUND_FLOOR))
        self._points += earned
        logger.info(f"Loyalty earned {earned} on ${amount}, balance {self._points}")
        return earned

    def redeem(self, flag_set: bool) -> int:
        """Deduct the redemption block when requested and affordable; returns points deducted."""
        if not flag_set or not self.can_redeem():
            return 0
        self._points -= LOYALTY_REDEEM_POINTS
        logger.info(f"Loyalty redeemed {LOYALTY_REDEEM_POINTS}, balance {self._points}")
        return LOYALTY_REDEEM_POINTS

    def reward_tiers(self) -> list[tuple[int, str, bool]]:
        """Return (cost, reward, affordable) rows for the loyalty screen."""
        return [(cost, reward, self._points >= cost) for cost, reward in REWARD_TIERS]
