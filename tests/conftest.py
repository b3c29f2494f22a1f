"""Shared fixtures for kiosk tests."""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from kiosk.cart import Cart
from kiosk.data import Catalog
from kiosk.loyalty import LoyaltyAccount
from kiosk.models import Product
from kiosk.session import OrderSession


def make_product(name: str, price: str, category: str = "Coffee") -> Product:
    return Product(
        name=name,
        price=Decimal(price),
        description=f"{name} description",
        image_ref=f"{category.lower()}/{name.lower().replace(' ', '-')}.jpg",
        category=category,
    )


@pytest.fixture
def latte() -> Product:
    return make_product("Latte", "4.50")


@pytest.fixture
def muffin() -> Product:
    return make_product("Muffin", "3.25", category="Pastries")


@pytest.fixture
def small_catalog(latte: Product, muffin: Product) -> Catalog:
    return Catalog([("Coffee", [latte, make_product("Mocha", "5.00")]), ("Pastries", [muffin])])


@pytest.fixture
def session() -> OrderSession:
    return OrderSession(cart=Cart(), loyalty=LoyaltyAccount(), rng=random.Random(7))
