"""Menu browsing and item customization screens."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Checkbox, RadioButton, RadioSet, Static, TextArea

from kiosk.constant import CUSTOMIZE_CHOICES, CUSTOMIZE_EXTRAS
from kiosk.models import Product
from kiosk.navigation import MENU, ORDER_TYPE
from kiosk.rendering import format_order_type, format_product
from kiosk.state import KioskState
from kiosk.widgets import KioskHeader, ThumbnailCache

logger = logging.getLogger(__name__)


class ProductCard(Horizontal):
    """One product row; its buttons act on the product it was built for."""

    def __init__(self, product: Product, state: KioskState, thumbnails: ThumbnailCache) -> None:
        super().__init__(classes="product-card")
        self.product = product
        self.state = state
        self.thumbnails = thumbnails

    def compose(self) -> ComposeResult:
        yield Static(self.thumbnails.get(self.product), classes="thumbnail")
        yield Static(format_product(self.product), classes="product-info")
        with Vertical(classes="product-actions"):
            yield Button("Add to Cart", classes="add-to-cart", variant="error")
            yield Button("Customize", classes="customize")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("add-to-cart"):
            self.state.add_to_cart(self.product.name)
        elif event.button.has_class("customize"):
            self.state.open_customize(self.product.name)


class MenuView(Vertical):
    def __init__(self, state: KioskState, thumbnails: ThumbnailCache, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state
        self.thumbnails = thumbnails
        self._shown_category: str | None = None

    def compose(self) -> ComposeResult:
        yield KioskHeader("Our Menu", self.state)
        with Horizontal(id="order-type-bar"):
            yield Static(id="menu-order-type")
            yield Button("Change", id="menu-change-order-type")
        with Horizontal(id="category-tabs"):
            for category in self.state.catalog.category_names:
                yield Button(category, name=category, classes="category-tab")
        yield VerticalScroll(id="product-list")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one(KioskHeader).refresh_view()
        self.query_one("#menu-order-type", Static).update(format_order_type(self.state.session.order_type))
        selected = self.state.selected_category
        for tab in self.query(".category-tab").results(Button):
            tab.variant = "error" if tab.name == selected else "default"
        if selected != self._shown_category:
            self._rebuild_products(selected)

    def _rebuild_products(self, category: str) -> None:
        product_list = self.query_one("#product-list", VerticalScroll)
        product_list.remove_children()
        product_list.mount(
            *(ProductCard(product, self.state, self.thumbnails) for product in self.state.catalog.products(category))
        )
        product_list.scroll_home(animate=False)
        self._shown_category = category

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("category-tab"):
            event.stop()
            self.state.select_category(event.button.name)
        elif event.button.id == "menu-change-order-type":
            event.stop()
            self.state.go(ORDER_TYPE)


class CustomizeView(Vertical):
    """
    Size, milk, sweetener, extras and free-text instructions for one product.

    The choices stay on this screen: both buttons return to the menu and
    leave the cart untouched.
    """

    def __init__(self, state: KioskState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self) -> ComposeResult:
        yield KioskHeader("Customize Your Order", self.state)
        yield Static(id="customize-item", classes="view-title")
        with VerticalScroll(id="customize-options"):
            for choice, (options, _default) in CUSTOMIZE_CHOICES.items():
                yield Static(choice.title(), classes="section-title")
                with RadioSet(name=choice, classes="customize-choice"):
                    for option in options:
                        yield RadioButton(option, name=option)
            yield Static("Extras", classes="section-title")
            for extra in CUSTOMIZE_EXTRAS:
                yield Checkbox(extra, name=extra, classes="customize-extra")
            yield Static("Special Instructions", classes="section-title")
            yield TextArea(id="customize-instructions")
        with Horizontal(classes="action-bar"):
            yield Button("Cancel", id="customize-cancel")
            yield Button("Add to Cart", id="customize-add", variant="error")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one(KioskHeader).refresh_view()
        product = self.state.customizing
        title = f"Customize Your Item: {product.name}" if product is not None else "Customize Your Item"
        self.query_one("#customize-item", Static).update(title)
        self._reset_choices()

    def _reset_choices(self) -> None:
        for radio_set in self.query(".customize-choice").results(RadioSet):
            _options, default = CUSTOMIZE_CHOICES[radio_set.name]
            for button in radio_set.query(RadioButton):
                if button.name == default:
                    button.value = True
        for extra in self.query(".customize-extra").results(Checkbox):
            extra.value = False
        self.query_one("#customize-instructions", TextArea).load_text("")

    def selections(self) -> dict[str, object]:
        chosen: dict[str, object] = {}
        for radio_set in self.query(".customize-choice").results(RadioSet):
            pressed = radio_set.pressed_button
            chosen[radio_set.name] = pressed.name if pressed is not None else None
        chosen["extras"] = [extra.name for extra in self.query(".customize-extra").results(Checkbox) if extra.value]
        chosen["instructions"] = self.query_one("#customize-instructions", TextArea).text
        return chosen

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "customize-add":
            event.stop()
            product = self.state.customizing
            logger.info(f"Customized {product.name if product else '?'}: {self.selections()}")
            self.state.go(MENU)
        elif event.button.id == "customize-cancel":
            event.stop()
            self.state.go(MENU)
