from __future__ import annotations

import random
from datetime import datetime

import pytest
from textual.events import AppBlur, AppFocus
from textual.widgets import Button, Checkbox, ContentSwitcher, RadioButton

from kiosk.assets import AssetStore
from kiosk.cart_view import CartLineRow
from kiosk.kiosk_app import KioskApp
from kiosk.menu_view import ProductCard
from kiosk.models import OrderStage, OrderType
from kiosk.navigation import CART, CHECKOUT, CONFIRMATION, CUSTOMIZE, LOYALTY, MENU, ORDER_TYPE, WELCOME
from kiosk.session import OrderSession
from kiosk.state import KioskState
from kiosk.welcome_view import format_clock


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_app(tmp_path, small_catalog):
    def factory(animations: bool = False) -> KioskApp:
        state = KioskState(catalog=small_catalog, session=OrderSession(rng=random.Random(2)))
        return KioskApp(
            state=state,
            store=AssetStore(tmp_path),
            clock=lambda: datetime(2024, 1, 1, 9, 5),
            animations=animations,
        )

    return factory


def _current(app: KioskApp) -> str | None:
    return app.query_one("#screens", ContentSwitcher).current


def test_format_clock():
    assert format_clock(datetime(2024, 1, 1, 21, 30)) == "Time: 09:30 PM"


@pytest.mark.anyio
async def test_startup_writes_placeholders(make_app, tmp_path):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        assert _current(app) == WELCOME
        assert (tmp_path / "pastries" / "muffin.jpg").is_file()
        assert not app.scheduler.is_paused("pulse")


@pytest.mark.anyio
async def test_full_order_flow(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()

        app.query_one("#start-order", Button).press()
        await pilot.pause()
        assert _current(app) == ORDER_TYPE
        assert app.scheduler.is_paused("pulse")

        app.query_one("#take-out", Button).press()
        await pilot.pause()
        assert _current(app) == MENU
        assert app.state.session.order_type is OrderType.TAKE_OUT

        card = app.query(ProductCard).first()
        card.query_one(".add-to-cart", Button).press()
        await pilot.pause()
        assert app.state.cart.line_for(card.product.name).quantity == 1
        assert str(app.query_one("#menu").query_one(".header-cart", Button).label) == "Cart (1)"

        await pilot.press("c")
        await pilot.pause()
        assert _current(app) == CART

        app.query(CartLineRow).first().query_one(".increment", Button).press()
        await pilot.pause()
        assert app.state.cart.line_for(card.product.name).quantity == 2

        app.query_one("#cart-checkout", Button).press()
        await pilot.pause()
        assert _current(app) == CHECKOUT
        assert app.state.session.stage is OrderStage.CHECKOUT

        app.query_one("#use-loyalty", Checkbox).toggle()
        await pilot.pause()
        assert app.state.session.redeem_requested

        app.query_one("#place-order", Button).press()
        await pilot.pause()
        assert _current(app) == CONFIRMATION
        confirmation = app.state.session.last_confirmation
        assert confirmation.points_redeemed == 100
        assert app.state.cart.is_empty()

        app.query_one("#return-home", Button).press()
        await pilot.pause()
        assert _current(app) == WELCOME
        assert app.state.session.stage is OrderStage.BROWSING
        assert app.state.loyalty.points == confirmation.points_balance


@pytest.mark.anyio
async def test_empty_cart_cannot_check_out(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        await pilot.press("c")
        await pilot.pause()

        assert _current(app) == CART
        assert app.query_one("#cart-checkout", Button).disabled
        assert app.state.go(CHECKOUT) is False
        await pilot.pause()
        assert _current(app) == CART

        await pilot.press("escape")
        await pilot.pause()
        assert _current(app) == WELCOME


@pytest.mark.anyio
async def test_removing_last_unit_spawns_marker(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.state.add_to_cart("Latte")
        app.state.go(CART)
        await pilot.pause()
        app.scheduler.pause("markers")
        app.state.markers.clear()

        app.query(CartLineRow).first().query_one(".decrement", Button).press()
        await pilot.pause()

        assert app.state.cart.is_empty()
        assert [marker.is_addition for marker in app.state.markers.snapshot()] == [False]
        assert len(app.query(CartLineRow)) == 0
        assert str(app.query_one("#cart").query_one(".header-cart", Button).label) == "Cart (0)"


@pytest.mark.anyio
async def test_customize_returns_to_menu_without_adding(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.state.go(MENU)
        await pilot.pause()

        app.query(ProductCard).first().query_one(".customize", Button).press()
        await pilot.pause()
        assert _current(app) == CUSTOMIZE

        app.query_one("#customize-add", Button).press()
        await pilot.pause()
        assert _current(app) == MENU
        assert app.state.cart.is_empty()


@pytest.mark.anyio
async def test_category_tab_switches_products(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.state.go(MENU)
        await pilot.pause()

        tab = next(button for button in app.query(".category-tab").results(Button) if button.name == "Pastries")
        tab.press()
        await pilot.pause()

        assert app.state.selected_category == "Pastries"
        assert [card.product.name for card in app.query(ProductCard)] == ["Muffin"]


@pytest.mark.anyio
async def test_card_fields_follow_payment_method(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.state.add_to_cart("Latte")
        app.state.go(CART)
        app.state.go(CHECKOUT)
        await pilot.pause()
        assert app.query_one("#card-details").display

        cash = next(button for button in app.query(RadioButton) if button.name == "cash")
        cash.value = True
        await pilot.pause()

        assert not app.query_one("#card-details").display


@pytest.mark.anyio
async def test_loyalty_rewards_enabled_by_balance(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.query_one("#open-loyalty", Button).press()
        await pilot.pause()

        assert _current(app) == LOYALTY
        enabled = {button.name: not button.disabled for button in app.query(".redeem-reward").results(Button)}
        assert enabled == {"100": True, "200": False, "300": False, "500": False, "1000": False}


@pytest.mark.anyio
async def test_fade_switches_after_ticks(make_app):
    app = make_app(animations=True)
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.state.go(LOYALTY)
        assert _current(app) == WELCOME

        await pilot.pause(1.0)

        assert _current(app) == LOYALTY
        assert not app.state.navigator.transition.active


@pytest.mark.anyio
async def test_blur_suspends_animations(make_app):
    app = make_app()
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.post_message(AppBlur())
        await pilot.pause()
        assert app.scheduler.is_paused("markers")

        app.post_message(AppFocus())
        await pilot.pause()
        assert not app.scheduler.is_paused("markers")


@pytest.mark.anyio
async def test_exit_while_logo_pulses(make_app):
    app = make_app(animations=True)
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause(0.2)
        assert not app.scheduler.is_paused("pulse")
        app.state.add_to_cart("Latte")
        await pilot.press("ctrl+q")

    assert app.return_code in (None, 0)


@pytest.mark.anyio
async def test_timer_ticks_tolerate_missing_widgets(make_app):
    app = make_app(animations=True)
    async with app.run_test(size=(140, 50)) as pilot:
        await pilot.pause()
        app.scheduler.stop()
        await app.query_one("#screens", ContentSwitcher).remove()
        await app.query_one("#feedback-lane").remove()
        app.state.markers.spawn(is_addition=True)
        app.state.navigator.goto(LOYALTY)

        app._tick_pulse()
        app._tick_markers()
        app._tick_fade()
