"""Static catalog data."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator, Sequence

from kiosk.constant import MENU_CATEGORY_ORDER, MENU_ITEMS_BY_CATEGORY
from kiosk.models import Product


class Catalog:
    """Read-only registry of categories and their products, in display order."""

    def __init__(self, categories: Iterable[tuple[str, Sequence[Product]]]) -> None:
        self._categories: dict[str, tuple[Product, ...]] = {}
        self._by_name: dict[str, Product] = {}
        for category, products in categories:
            if category in self._categories:
                raise ValueError(f"Duplicate category {category!r}")
            self._categories[category] = tuple(products)
            for product in products:
                if product.name in self._by_name:
                    raise ValueError(f"Duplicate product {product.name!r}")
                self._by_name[product.name] = product
        if not self._categories:
            raise ValueError("Catalog needs at least one category")

    @property
    def category_names(self) -> list[str]:
        return list(self._categories)

    @property
    def first_category(self) -> str:
        return next(iter(self._categories))

    def products(self, category: str) -> tuple[Product, ...]:
        try:
            return self._categories[category]
        except KeyError:
            raise ValueError(f"Unknown category {category!r}") from None

    def product(self, name: str) -> Product:
        try:
            return self._by_name[name]
        except KeyError:
            raise ValueError(f"Unknown product {name!r}") from None

    def __iter__(self) -> Iterator[Product]:
        for products in self._categories.values():
            yield from products

    def __len__(self) -> int:
        return len(self._by_name)


def build_catalog() -> Catalog:
    """Wrap the raw menu rows from kiosk.constant into a Catalog."""
    return Catalog(
        (
            category,
            [
                Product(
                    name=row["name"],
                    price=Decimal(row["price"]),
                    description=row["description"],
                    image_ref=row["image"],
                    category=category,
                )
                for row in MENU_ITEMS_BY_CATEGORY[category]
            ],
        )
        for category in MENU_CATEGORY_ORDER
    )


CATALOG = build_catalog()
