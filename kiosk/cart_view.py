"""Cart screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Static

from kiosk.models import CartLine
from kiosk.navigation import CHECKOUT, MENU
from kiosk.rendering import format_cart_line, format_money
from kiosk.state import KioskState
from kiosk.widgets import KioskHeader, ThumbnailCache


class CartLineRow(Horizontal):
    """Quantity controls for one cart line, addressed by product name."""

    def __init__(self, line: CartLine, state: KioskState, thumbnails: ThumbnailCache) -> None:
        super().__init__(classes="cart-line")
        self.product_name = line.product.name
        self.cart_line = line
        self.state = state
        self.thumbnails = thumbnails

    def compose(self) -> ComposeResult:
        yield Static(self.thumbnails.get(self.cart_line.product), classes="thumbnail")
        yield Static(format_cart_line(self.cart_line), classes="cart-line-info")
        yield Button("-", classes="decrement")
        yield Static(str(self.cart_line.quantity), classes="quantity")
        yield Button("+", classes="increment")
        yield Button("Remove", classes="remove", variant="warning")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("decrement"):
            self.state.decrement(self.product_name)
        elif event.button.has_class("increment"):
            self.state.increment(self.product_name)
        elif event.button.has_class("remove"):
            self.state.remove(self.product_name)


class CartView(Vertical):
    def __init__(self, state: KioskState, thumbnails: ThumbnailCache, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self.thumbnails = thumbnails

    def compose(self) -> ComposeResult:
        yield KioskHeader("Your Cart", self.state)
        yield VerticalScroll(id="cart-lines")
        yield Static(id="cart-total", classes="total-row")
        with Horizontal(classes="action-bar"):
            yield Button("Continue Shopping", id="continue-shopping")
            yield Button("Checkout", id="cart-checkout", variant="error")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one(KioskHeader).refresh_view()
        cart = self.state.cart
        lines_widget = self.query_one("#cart-lines", VerticalScroll)
        lines_widget.remove_children()
        if cart.is_empty():
            lines_widget.mount(Static("Your cart is empty", classes="empty-cart"))
        else:
            lines_widget.mount(*(CartLineRow(line, self.state, self.thumbnails) for line in cart))
        self.query_one("#cart-total", Static).update(f"Total: {format_money(cart.subtotal())}")
        self.query_one("#cart-checkout", Button).disabled = cart.is_empty()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "continue-shopping":
            event.stop()
            self.state.go(MENU)
        elif event.button.id == "cart-checkout":
            event.stop()
            if not self.state.go(CHECKOUT):
                self.app.notify("Your cart is empty", severity="warning")
