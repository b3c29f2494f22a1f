from __future__ import annotations

import pytest

from kiosk.navigation import CART, CHECKOUT, MENU, WELCOME, Navigator


def _drain(navigator: Navigator) -> list[str]:
    switched = []
    while navigator.transition.active:
        name = navigator.transition.tick()
        if name is not None:
            switched.append(name)
    return switched


def test_unknown_screen_raises():
    navigator = Navigator(can_checkout=lambda: True)

    with pytest.raises(ValueError):
        navigator.goto("kitchen")


def test_goto_updates_current_before_fade_completes():
    navigator = Navigator(can_checkout=lambda: True)

    assert navigator.goto(MENU)
    assert navigator.current == MENU
    assert navigator.previous == WELCOME
    assert navigator.displayed == WELCOME
    assert _drain(navigator) == [MENU]
    assert navigator.displayed == MENU


def test_checkout_blocked_with_empty_cart():
    navigator = Navigator(can_checkout=lambda: False)
    navigator.goto(CART)
    navigator.transition.finish()

    assert not navigator.goto(CHECKOUT)
    assert navigator.current == CART
    assert not navigator.transition.active


def test_checkout_only_reachable_from_cart():
    navigator = Navigator(can_checkout=lambda: True)
    navigator.goto(MENU)

    assert not navigator.goto(CHECKOUT)
    navigator.goto(CART)
    assert navigator.goto(CHECKOUT)
    assert navigator.current == CHECKOUT


def test_latest_request_wins_during_fade():
    navigator = Navigator(can_checkout=lambda: True)
    navigator.goto(MENU)
    navigator.transition.tick()
    navigator.goto(CART)

    assert _drain(navigator) == [CART]
    assert navigator.displayed == CART
    assert navigator.transition.opacity == 1.0
