"""Widgets shared by several kiosk screens."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import Resize
from textual.widgets import Button, Static

from kiosk.assets import AssetStore, load_product_image
from kiosk.config import THUMBNAIL_CELLS
from kiosk.models import Product
from kiosk.navigation import CART
from kiosk.rendering import image_to_text, render_marker_lane
from kiosk.state import KioskState


class ThumbnailCache:
    """Product thumbnails as terminal cells, rendered once per product."""

    def __init__(self, store: AssetStore, cells: tuple[int, int] = THUMBNAIL_CELLS) -> None:
        self.store = store
        self.cells = cells
        self._cache: dict[str, Text] = {}

    def get(self, product: Product) -> Text:
        cached = self._cache.get(product.name)
        if cached is None:
            width, height = self.cells
            cached = image_to_text(load_product_image(product, self.store), width, height)
            self._cache[product.name] = cached
        return cached.copy()


class KioskHeader(Horizontal):
    """Title bar with Home and, on shopping screens, a Cart (n) button."""

    DEFAULT_CSS = """
    KioskHeader {
        height: 3;
        background: #b41e1e;
        padding: 0 1;
    }

    KioskHeader .header-title {
        width: 1fr;
        content-align: center middle;
        height: 3;
        color: white;
        text-style: bold;
    }
    """

    def __init__(self, heading: str, state: KioskState, show_cart: bool = True) -> None:
        super().__init__()
        self.heading = heading
        self.state = state
        self.show_cart = show_cart

    def compose(self) -> ComposeResult:
        yield Button("Home", classes="header-home")
        yield Static(self.heading, classes="header-title")
        if self.show_cart:
            yield Button(self._cart_label(), classes="header-cart")

    def _cart_label(self) -> str:
        return f"Cart ({len(self.state.cart)})"

    def refresh_view(self) -> None:
        if not self.show_cart:
            return
        self.query_one(".header-cart", Button).label = self._cart_label()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("header-home"):
            self.state.return_home()
        elif event.button.has_class("header-cart"):
            self.state.go(CART)


class FeedbackLane(Static):
    """Narrow strip where +/- markers float up after cart changes."""

    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.state = state

    def on_resize(self, event: Resize) -> None:
        self.state.markers.resize(event.size.width, event.size.height)

    def redraw(self) -> None:
        width, height = self.size.width, self.size.height
        if width <= 0 or height <= 0:
            return
        self.update(render_marker_lane(self.state.markers.snapshot(), width, height))
