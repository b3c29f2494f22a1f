"""Application state shared by every view; all mutations go through here."""

from __future__ import annotations

import logging
from typing import Callable

from kiosk.animation import MarkerQueue
from kiosk.cart import Cart
from kiosk.data import CATALOG, Catalog
from kiosk.loyalty import LoyaltyAccount
from kiosk.models import Confirmation, OrderStage, OrderType, Product
from kiosk.navigation import CHECKOUT, CONFIRMATION, CUSTOMIZE, MENU, ORDER_TYPE, WELCOME, Navigator
from kiosk.session import OrderSession

logger = logging.getLogger(__name__)

# Change topics emitted to subscribers.
CART_CHANGED = "cart"
LOYALTY_CHANGED = "loyalty"
ORDER_CHANGED = "order"
CATEGORY_CHANGED = "category"
CUSTOMIZE_CHANGED = "customize"
SCREEN_CHANGED = "screen"

Listener = Callable[[str], None]


class KioskState:
    """
    The kiosk's single source of truth.

    Views read from it and call its intent methods; after each mutation the
    relevant topics are emitted so views can re-render from current state.
    """

    def __init__(
        self,
        catalog: Catalog = CATALOG,
        session: OrderSession | None = None,
        markers: MarkerQueue | None = None,
    ) -> None:
        self.catalog = catalog
        self.session = session or OrderSession()
        self.markers = markers or MarkerQueue()
        self.navigator = Navigator(can_checkout=lambda: not self.session.cart.is_empty())
        self.selected_category = catalog.first_category
        self.customizing: Product | None = None
        self._listeners: list[Listener] = []

    @property
    def cart(self) -> Cart:
        return self.session.cart

    @property
    def loyalty(self) -> LoyaltyAccount:
        return self.session.loyalty

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, *topics: str) -> None:
        for topic in topics:
            for listener in list(self._listeners):
                listener(topic)

    # Navigation

    def go(self, screen: str) -> bool:
        # A placed order is closed as soon as the kiosk leaves the confirmation.
        if self.session.stage is OrderStage.PLACED and screen != CONFIRMATION:
            self.session.reset()
            self._emit(ORDER_CHANGED)
        if screen == CHECKOUT:
            return self.begin_checkout()
        leaving = self.navigator.current
        if not self.navigator.goto(screen):
            return False
        if leaving == CHECKOUT and screen != CONFIRMATION:
            self.session.leave_checkout()
        self._emit(SCREEN_CHANGED)
        return True

    def start_order(self) -> bool:
        return self.go(ORDER_TYPE)

    def return_home(self) -> bool:
        return self.go(WELCOME)

    # Ordering

    def choose_order_type(self, order_type: OrderType) -> None:
        self.session.choose_order_type(order_type)
        self._emit(ORDER_CHANGED)
        self.go(MENU)

    def select_category(self, category: str) -> None:
        self.catalog.products(category)
        self.selected_category = category
        self._emit(CATEGORY_CHANGED)

    def add_to_cart(self, product_name: str) -> None:
        self.cart.add_item(self.catalog.product(product_name))
        self.markers.spawn(is_addition=True)
        self._emit(CART_CHANGED)

    def increment(self, product_name: str) -> bool:
        line = self.cart.line_for(product_name)
        if line is None:
            logger.info(f"Increment ignored: {product_name} not in cart")
            return False
        self.cart.increment_line(line)
        self._emit(CART_CHANGED)
        return True

    def decrement(self, product_name: str) -> bool:
        line = self.cart.line_for(product_name)
        if line is None:
            logger.info(f"Decrement ignored: {product_name} not in cart")
            return False
        if self.cart.decrement_line(line):
            self.markers.spawn(is_addition=False)
        self._emit(CART_CHANGED)
        return True

    def remove(self, product_name: str) -> bool:
        line = self.cart.line_for(product_name)
        if line is None:
            logger.info(f"Remove ignored: {product_name} not in cart")
            return False
        self.cart.remove_line(line)
        self.markers.spawn(is_addition=False)
        self._emit(CART_CHANGED)
        return True

    def open_customize(self, product_name: str) -> None:
        self.customizing = self.catalog.product(product_name)
        self._emit(CUSTOMIZE_CHANGED)
        self.go(CUSTOMIZE)

    # Checkout

    def begin_checkout(self) -> bool:
        if not self.navigator.goto(CHECKOUT):
            return False
        self.session.begin_checkout()
        self._emit(ORDER_CHANGED, SCREEN_CHANGED)
        return True

    def set_redeem(self, flag: bool) -> None:
        if flag == self.session.redeem_requested:
            return
        self.session.set_redeem(flag)
        self._emit(ORDER_CHANGED)

    def place_order(self) -> Confirmation | None:
        confirmation = self.session.place_order()
        if confirmation is None:
            return None
        self.navigator.goto(CONFIRMATION)
        self._emit(CART_CHANGED, LOYALTY_CHANGED, ORDER_CHANGED, SCREEN_CHANGED)
        return confirmation
