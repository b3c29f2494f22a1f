"""Main Textual app class."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.events import AppBlur, AppFocus
from textual.widget import Widget
from textual.widgets import ContentSwitcher, Header

from kiosk.animation import AnimationScheduler, LogoPulse
from kiosk.assets import AssetStore, ensure_placeholders
from kiosk.cart_view import CartView
from kiosk.checkout_view import CheckoutView, ConfirmationView
from kiosk.config import FADE_TICK_SECONDS, MARKER_TICK_SECONDS, PULSE_TICK_SECONDS, SHOP_NAME
from kiosk.info_view import AboutView, LoyaltyView
from kiosk.menu_view import CustomizeView, MenuView
from kiosk.navigation import ABOUT, CART, CHECKOUT, CONFIRMATION, CUSTOMIZE, LOYALTY, MENU, ORDER_TYPE, WELCOME
from kiosk.state import (
    CART_CHANGED,
    CATEGORY_CHANGED,
    CUSTOMIZE_CHANGED,
    LOYALTY_CHANGED,
    ORDER_CHANGED,
    SCREEN_CHANGED,
    KioskState,
)
from kiosk.welcome_view import Clock, OrderTypeView, WelcomeView
from kiosk.widgets import FeedbackLane, KioskHeader, ThumbnailCache

logger = logging.getLogger(__name__)

MARKERS_TIMER = "markers"
FADE_TIMER = "fade"
PULSE_TIMER = "pulse"

# Views to re-render for each state change topic.
_VIEWS_BY_TOPIC: dict[str, tuple[str, ...]] = {
    CART_CHANGED: (CART, CHECKOUT),
    LOYALTY_CHANGED: (CHECKOUT, CONFIRMATION, LOYALTY),
    ORDER_CHANGED: (MENU, CHECKOUT, CONFIRMATION),
    CATEGORY_CHANGED: (MENU,),
    CUSTOMIZE_CHANGED: (CUSTOMIZE,),
}


class KioskApp(App):
    """A single-window self-service ordering kiosk."""

    TITLE = SHOP_NAME
    SUB_TITLE = "Self-Service Ordering"

    CSS = """
    Screen {
        layout: vertical;
        background: #f8f8f8;
        color: #202020;
    }

    #kiosk-body {
        height: 1fr;
    }

    #screens {
        width: 1fr;
        height: 1fr;
    }

    #screens > * {
        height: 1fr;
    }

    #feedback-lane {
        width: 5;
        height: 1fr;
    }

    Button {
        margin: 0 1;
    }

    .view-title {
        text-style: bold;
        color: #8c1414;
        content-align: center middle;
        width: 1fr;
        margin: 1 0;
    }

    .section-title {
        text-style: bold;
        color: #8c1414;
        margin-top: 1;
    }

    .action-bar {
        height: 3;
        align: center middle;
        dock: bottom;
    }

    .total-row {
        text-style: bold;
        padding: 1 2;
    }

    #welcome-center {
        align: center middle;
        height: 1fr;
    }

    #logo {
        width: 1fr;
        text-align: center;
        padding: 1;
    }

    #welcome-tagline {
        width: 1fr;
        text-align: center;
        margin-bottom: 1;
    }

    #welcome-actions {
        height: 3;
        align: center middle;
    }

    #welcome-footer {
        height: 1;
        dock: bottom;
        background: #8c1414;
        color: white;
        padding: 0 1;
    }

    #welcome-hint {
        width: 1fr;
    }

    #welcome-clock {
        width: auto;
    }

    #order-type-options {
        align: center middle;
        height: 1fr;
    }

    .order-type-card {
        width: 36;
        height: auto;
        border: round #b41e1e;
        padding: 1;
        margin: 0 2;
    }

    #order-type-bar, .order-type-row {
        height: 3;
        padding: 0 1;
    }

    #menu-order-type, #checkout-order-type {
        width: auto;
        content-align: left middle;
        height: 3;
    }

    #category-tabs {
        height: 3;
    }

    #product-list, #cart-lines {
        height: 1fr;
    }

    .product-card, .cart-line {
        height: auto;
        border-bottom: solid #dcdcdc;
        padding: 0 1;
    }

    .thumbnail {
        width: 12;
        height: 6;
        margin-right: 1;
    }

    .product-info, .cart-line-info {
        width: 1fr;
    }

    .product-actions {
        width: 20;
        height: auto;
    }

    .quantity {
        width: 4;
        content-align: center middle;
        height: 3;
    }

    .empty-cart {
        color: #808080;
        padding: 2;
    }

    #checkout-body {
        height: 1fr;
    }

    #checkout-summary, #checkout-payment {
        width: 1fr;
        border: round #dcdcdc;
        padding: 0 1;
    }

    #card-details {
        height: auto;
    }

    #customize-options {
        height: 1fr;
        padding: 0 2;
    }

    #customize-instructions {
        height: 5;
    }

    #confirmation-card {
        align: center middle;
        height: 1fr;
    }

    #confirmation-body {
        width: 1fr;
        text-align: center;
    }

    #loyalty-card {
        height: auto;
        border: round #b41e1e;
        padding: 0 2;
    }

    .reward-row {
        height: 3;
    }

    .reward-info {
        width: 1fr;
        content-align: left middle;
        height: 3;
    }
    """

    BINDINGS = [
        Binding("escape", "home", "Home", priority=True),
        ("c", "cart", "Cart"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        state: KioskState | None = None,
        store: AssetStore | None = None,
        clock: Clock = datetime.now,
        animations: bool = True,
    ) -> None:
        super().__init__()
        self.state = state or KioskState()
        self.store = store or AssetStore()
        self.clock = clock
        self.animations = animations
        self.thumbnails = ThumbnailCache(self.store)
        self.scheduler = AnimationScheduler(self)
        self.pulse = LogoPulse()
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="kiosk-body"):
            with ContentSwitcher(initial=self.state.navigator.displayed, id="screens"):
                yield WelcomeView(self.state, self.clock, id=WELCOME)
                yield OrderTypeView(self.state, id=ORDER_TYPE)
                yield MenuView(self.state, self.thumbnails, id=MENU)
                yield CustomizeView(self.state, id=CUSTOMIZE)
                yield CartView(self.state, self.thumbnails, id=CART)
                yield CheckoutView(self.state, id=CHECKOUT)
                yield ConfirmationView(self.state, id=CONFIRMATION)
                yield LoyaltyView(self.state, id=LOYALTY)
                yield AboutView(self.state, id=ABOUT)
            yield FeedbackLane(self.state, id="feedback-lane")

    def on_mount(self) -> None:
        created = ensure_placeholders(self.state.catalog, self.store)
        logger.info(f"App mounted: {created} placeholder image(s) created in {self.store.root}")

        self.scheduler.add(MARKERS_TIMER, MARKER_TICK_SECONDS, self._tick_markers)
        self.scheduler.add(FADE_TIMER, FADE_TICK_SECONDS, self._tick_fade, paused=True)
        self.scheduler.add(PULSE_TIMER, PULSE_TICK_SECONDS, self._tick_pulse, paused=self.state.navigator.displayed != WELCOME)
        self.scheduler.start()
        self._unsubscribe = self.state.subscribe(self._on_state_change)

    def on_unmount(self) -> None:
        self.scheduler.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()

    def on_app_blur(self, event: AppBlur) -> None:
        self.scheduler.suspend()

    def on_app_focus(self, event: AppFocus) -> None:
        self.scheduler.wake()

    def action_home(self) -> None:
        self.state.return_home()

    def action_cart(self) -> None:
        self.state.go(CART)

    def _view(self, screen: str) -> Widget:
        return self.query_one(f"#{screen}")

    def _on_state_change(self, topic: str) -> None:
        if topic == SCREEN_CHANGED:
            self._start_transition()
            return
        if topic == CART_CHANGED:
            for header in self.query(KioskHeader):
                header.refresh_view()
        for screen in _VIEWS_BY_TOPIC.get(topic, ()):
            self._view(screen).refresh_view()

    def _start_transition(self) -> None:
        transition = self.state.navigator.transition
        if not self.animations:
            self._show(transition.finish())
            return
        self.scheduler.resume(FADE_TIMER)

    def _show(self, screen: str) -> None:
        self.query_one("#screens", ContentSwitcher).current = screen
        self._view(screen).refresh_view()
        if screen == WELCOME:
            self.scheduler.resume(PULSE_TIMER)
        else:
            self.scheduler.pause(PULSE_TIMER)

    # Timers can fire once more while the DOM is being torn down on exit.

    def _tick_fade(self) -> None:
        transition = self.state.navigator.transition
        switched = transition.tick()
        try:
            self.query_one("#screens").styles.opacity = transition.opacity
            if switched is not None:
                self._show(switched)
        except NoMatches:
            return
        if not transition.active:
            self.scheduler.pause(FADE_TIMER)

    def _tick_markers(self) -> None:
        if not self.state.markers.tick():
            return
        try:
            lane = self.query_one(FeedbackLane)
        except NoMatches:
            return
        lane.redraw()

    def _tick_pulse(self) -> None:
        scale = self.pulse.tick()
        try:
            self.query_one(WelcomeView).update_logo(scale)
        except NoMatches:
            return
