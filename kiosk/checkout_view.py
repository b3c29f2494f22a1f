"""Checkout and order confirmation screens."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Checkbox, Input, RadioButton, RadioSet, Static

from kiosk.config import LOYALTY_REDEEM_POINTS, LOYALTY_REDEEM_VALUE
from kiosk.constant import CARD_PAYMENT_METHODS, PAYMENT_METHODS
from kiosk.navigation import CART, ORDER_TYPE
from kiosk.rendering import format_money, format_order_type, format_summary_lines, format_totals
from kiosk.state import KioskState
from kiosk.widgets import KioskHeader

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHOD = "credit"


class CheckoutView(Vertical):
    """
    Order summary, loyalty redemption and payment method.

    Card fields are collected for show only; nothing here validates or
    charges them.
    """

    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self.payment_method = DEFAULT_PAYMENT_METHOD

    def compose(self) -> ComposeResult:
        yield KioskHeader("Checkout", self.state)
        with Horizontal(id="checkout-body"):
            with VerticalScroll(id="checkout-summary"):
                yield Static("Order Summary", classes="section-title")
                with Horizontal(classes="order-type-row"):
                    yield Static(id="checkout-order-type")
                    yield Button("Change", id="checkout-change-order-type")
                yield Static(id="checkout-items")
                yield Static(id="checkout-totals", classes="total-row")
                yield Checkbox(
                    f"Use {LOYALTY_REDEEM_POINTS} loyalty points for {format_money(LOYALTY_REDEEM_VALUE)} off",
                    id="use-loyalty",
                )
                yield Static(id="loyalty-note")
            with VerticalScroll(id="checkout-payment"):
                yield Static("Payment Method", classes="section-title")
                with RadioSet(id="payment-method"):
                    for key, label in PAYMENT_METHODS.items():
                        yield RadioButton(label, name=key, value=key == DEFAULT_PAYMENT_METHOD)
                with Vertical(id="card-details"):
                    yield Input(placeholder="Card Number", id="card-number")
                    yield Input(placeholder="MM/YY", id="card-expiry")
                    yield Input(placeholder="CVV", id="card-cvv", password=True)
        with Horizontal(classes="action-bar"):
            yield Button("Back to Cart", id="back-to-cart")
            yield Button("Place Order", id="place-order", variant="error")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        session = self.state.session
        loyalty = self.state.loyalty
        self.query_one(KioskHeader).refresh_view()
        self.query_one("#checkout-order-type", Static).update(format_order_type(session.order_type))
        self.query_one("#checkout-items", Static).update(format_summary_lines(self.state.cart))
        self.query_one("#checkout-totals", Static).update(format_totals(session.totals()))

        # Echoed Changed events are no-ops: set_redeem ignores an unchanged flag.
        checkbox = self.query_one("#use-loyalty", Checkbox)
        checkbox.value = session.redeem_requested
        checkbox.disabled = not loyalty.can_redeem()
        self.query_one("#loyalty-note", Static).update(Text(f"(You have {loyalty.points} points)", style="dim"))

        self.query_one("#card-details").display = self.payment_method in CARD_PAYMENT_METHODS
        self.query_one("#place-order", Button).disabled = self.state.cart.is_empty()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id == "use-loyalty":
            event.stop()
            self.state.set_redeem(event.value)

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        if event.radio_set.id != "payment-method":
            return
        event.stop()
        self.payment_method = event.pressed.name or DEFAULT_PAYMENT_METHOD
        self.query_one("#card-details").display = self.payment_method in CARD_PAYMENT_METHODS

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back-to-cart":
            event.stop()
            self.state.go(CART)
        elif event.button.id == "checkout-change-order-type":
            event.stop()
            self.state.go(ORDER_TYPE)
        elif event.button.id == "place-order":
            event.stop()
            confirmation = self.state.place_order()
            if confirmation is not None:
                logger.info(f"Order #{confirmation.order_number} paid by {PAYMENT_METHODS[self.payment_method]}")
                self._reset_payment()

    def _reset_payment(self) -> None:
        self.payment_method = DEFAULT_PAYMENT_METHOD
        for field in self.query(Input):
            field.value = ""
        for button in self.query_one("#payment-method", RadioSet).query(RadioButton):
            if button.name == DEFAULT_PAYMENT_METHOD:
                button.value = True


class ConfirmationView(Vertical):
    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self) -> ComposeResult:
        yield KioskHeader("Order Confirmation", self.state, show_cart=False)
        with Vertical(id="confirmation-card"):
            yield Static("Thank You for Your Order!", classes="view-title")
            yield Static(id="confirmation-body")
            yield Button("Return to Home", id="return-home", variant="error")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        confirmation = self.state.session.last_confirmation
        body = self.query_one("#confirmation-body", Static)
        if confirmation is None:
            body.update("")
            return

        text = Text(justify="center")
        text.append_text(format_order_type(confirmation.order_type))
        text.append(f"\n\nOrder #{confirmation.order_number}\n", style="bold #8c1414")
        text.append("Please wait for your order number to be called at the counter.\n\n")
        text.append(f"Total paid: {format_money(confirmation.totals.total)}\n")
        if confirmation.points_redeemed:
            text.append(f"Points redeemed: {confirmation.points_redeemed}\n")
        text.append(f"Points earned: {confirmation.points_earned}\n", style="#28a028")
        text.append(f"Total points: {confirmation.points_balance}", style="bold")
        body.update(text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "return-home":
            event.stop()
            self.state.return_home()
