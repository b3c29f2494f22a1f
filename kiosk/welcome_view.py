"""Welcome and order-type screens."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from kiosk.config import SHOP_NAME
from kiosk.models import OrderType
from kiosk.navigation import ABOUT, LOYALTY
from kiosk.rendering import pulse_style
from kiosk.state import KioskState
from kiosk.widgets import KioskHeader

Clock = Callable[[], datetime]


def format_clock(now: datetime) -> str:
    return f"Time: {now.strftime('%I:%M %p')}"


class WelcomeView(Vertical):
    """Landing screen with the pulsing logo and entry points."""

    def __init__(self, state: KioskState, clock: Clock = datetime.now, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self.clock = clock

    def compose(self) -> ComposeResult:
        with Vertical(id="welcome-center"):
            yield Static(id="logo")
            yield Static("Welcome! Order your favourite drinks and treats here.", id="welcome-tagline")
            with Horizontal(id="welcome-actions"):
                yield Button("Start Order", id="start-order", variant="error")
                yield Button("Loyalty Program", id="open-loyalty")
                yield Button("About Us", id="open-about")
        with Horizontal(id="welcome-footer"):
            yield Static("Touch screen to begin your coffee journey", id="welcome-hint")
            yield Static(id="welcome-clock")

    def on_mount(self) -> None:
        self.update_logo(1.0)
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one("#welcome-clock", Static).update(format_clock(self.clock()))

    def update_logo(self, scale: float) -> None:
        self.query_one("#logo", Static).update(Text(SHOP_NAME, style=pulse_style(scale), justify="center"))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "start-order":
            self.state.start_order()
        elif event.button.id == "open-loyalty":
            self.state.go(LOYALTY)
        elif event.button.id == "open-about":
            self.state.go(ABOUT)


class OrderTypeView(Vertical):
    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self) -> ComposeResult:
        yield KioskHeader("Select Order Type", self.state, show_cart=False)
        yield Static("How would you like to enjoy your order?", classes="view-title")
        with Horizontal(id="order-type-options"):
            with Vertical(classes="order-type-card"):
                yield Static("Enjoy your order in our cozy café", classes="option-caption")
                yield Button(OrderType.DINE_IN.value, id="dine-in", variant="error")
            with Vertical(classes="order-type-card"):
                yield Static("Grab your order and go", classes="option-caption")
                yield Button(OrderType.TAKE_OUT.value, id="take-out", variant="error")

    def refresh_view(self) -> None:
        pass

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "dine-in":
            event.stop()
            self.state.choose_order_type(OrderType.DINE_IN)
        elif event.button.id == "take-out":
            event.stop()
            self.state.choose_order_type(OrderType.TAKE_OUT)
