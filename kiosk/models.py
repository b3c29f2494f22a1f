"""Domain models for the kiosk."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class OrderType(Enum):
    DINE_IN = "Dine In"
    TAKE_OUT = "Take Out"


class OrderStage(Enum):
    BROWSING = "browsing"
    CHECKOUT = "checkout"
    PLACED = "placed"


@dataclass(frozen=True)
class Product:
    """A catalog product. Names are unique within the catalog."""

    name: str
    price: Decimal
    description: str
    image_ref: str
    category: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be >= 0 for {self.name!r}")


@dataclass
class CartLine:
    """One product in the cart with its quantity (always >= 1 while in a cart)."""

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"quantity must be >= 1 for {self.product.name!r}")

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CheckoutTotals:
    """Itemized, 2-dp checkout amounts."""

    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal

    @property
    def discount_applied(self) -> bool:
        return self.discount > 0


@dataclass(frozen=True)
class Confirmation:
    """Outcome of a placed order, shown on the confirmation screen."""

    order_number: int
    order_type: OrderType
    totals: CheckoutTotals
    points_redeemed: int
    points_earned: int
    points_balance: int
