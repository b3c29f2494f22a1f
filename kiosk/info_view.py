"""Loyalty program and About screens."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Static

from kiosk.config import SHOP_NAME
from kiosk.constant import ABOUT_CONTACT, ABOUT_STORY, ABOUT_VALUES, LOYALTY_HOW_IT_WORKS, REWARD_TIERS
from kiosk.state import KioskState
from kiosk.widgets import KioskHeader


def _bullets(items: list[str]) -> Text:
    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n")
        text.append(f"• {item}")
    return text


class LoyaltyView(Vertical):
    """
    Points balance and the reward catalogue.

    Redeem buttons only tell the customer to claim at the counter; points
    leave the account solely through checkout.
    """

    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self) -> ComposeResult:
        yield KioskHeader("Loyalty Program", self.state, show_cart=False)
        with VerticalScroll():
            with Vertical(id="loyalty-card"):
                yield Static(f"{SHOP_NAME} Rewards", classes="section-title")
                yield Static(id="loyalty-points")
            yield Static("Available Rewards", classes="section-title")
            for cost, reward in REWARD_TIERS:
                with Horizontal(classes="reward-row"):
                    yield Static(Text.assemble((f"{cost} points", "bold #8c1414"), f"  {reward}"), classes="reward-info")
                    yield Button("Redeem", name=str(cost), classes="redeem-reward")
            yield Static("How It Works", classes="section-title")
            yield Static(_bullets(LOYALTY_HOW_IT_WORKS))
        with Horizontal(classes="action-bar"):
            yield Button("Return to Home", id="loyalty-home", variant="error")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        loyalty = self.state.loyalty
        self.query_one("#loyalty-points", Static).update(Text(f"{loyalty.points} points", style="bold"))
        affordable = {cost: ok for cost, _reward, ok in loyalty.reward_tiers()}
        for button in self.query(".redeem-reward").results(Button):
            button.disabled = not affordable.get(int(button.name), False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("redeem-reward"):
            event.stop()
            reward = dict(REWARD_TIERS)[int(event.button.name)]
            self.app.notify(f"Show this screen at the counter to claim: {reward}", title="Reward")
        elif event.button.id == "loyalty-home":
            event.stop()
            self.state.return_home()


class AboutView(Vertical):
    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self) -> ComposeResult:
        yield KioskHeader(f"About {SHOP_NAME}", self.state, show_cart=False)
        with VerticalScroll():
            yield Static("Our Story", classes="section-title")
            yield Static(ABOUT_STORY)
            yield Static("Our Values", classes="section-title")
            yield Static(_bullets(ABOUT_VALUES))
            yield Static("Contact Us", classes="section-title")
            yield Static(_bullets([f"{label}: {value}" for label, value in ABOUT_CONTACT.items()]))
        with Horizontal(classes="action-bar"):
            yield Button("Return to Home", id="about-home", variant="error")

    def refresh_view(self) -> None:
        pass

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "about-home":
            event.stop()
            self.state.return_home()
