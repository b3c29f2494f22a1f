"""Screen navigation state machine."""

from __future__ import annotations

import logging
from typing import Callable

from kiosk.animation import FadeTransition

logger = logging.getLogger(__name__)

WELCOME = "welcome"
ORDER_TYPE = "orderType"
MENU = "menu"
CUSTOMIZE = "customize"
CART = "cart"
CHECKOUT = "checkout"
CONFIRMATION = "confirmation"
LOYALTY = "loyalty"
ABOUT = "about"

SCREENS: tuple[str, ...] = (
    WELCOME,
    ORDER_TYPE,
    MENU,
    CUSTOMIZE,
    CART,
    CHECKOUT,
    CONFIRMATION,
    LOYALTY,
    ABOUT,
)

# Checkout is entered from the cart, or re-entered from itself.
_CHECKOUT_ENTRY = frozenset({CART, CHECKOUT})


class Navigator:
    """
    Tracks the active screen and the fade that reveals it.

    current changes as soon as goto() accepts a request; transition.displayed
    follows once the fade-out reaches the switch point.
    """

    def __init__(self, can_checkout: Callable[[], bool], initial: str = WELCOME) -> None:
        _require_screen(initial)
        self._can_checkout = can_checkout
        self.current = initial
        self.previous: str | None = None
        self.transition = FadeTransition(initial)

    @property
    def displayed(self) -> str:
        return self.transition.displayed

    def goto(self, screen: str) -> bool:
        _require_screen(screen)
        if screen == CHECKOUT and (self.current not in _CHECKOUT_ENTRY or not self._can_checkout()):
            logger.info(f"Navigation to {screen} blocked from {self.current}")
            return False
        self.previous = self.current
        self.current = screen
        self.transition.start(screen)
        logger.info(f"Navigation {self.previous} -> {screen}")
        return True


def _require_screen(screen: str) -> None:
    if screen not in SCREENS:
        raise ValueError(f"Unknown screen {screen!r}")
