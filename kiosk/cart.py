"""Cart ledger: product lines and their derived subtotal."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterator

from kiosk.models import CartLine, Product

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class Cart:
    """Ordered product lines, at most one per product name, each with quantity >= 1."""

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(tuple(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def line_for(self, product_name: str) -> CartLine | None:
        for line in self._lines:
            if line.product.name == product_name:
                return line
        return None

    def add_item(self, product: Product) -> CartLine:
        """Add one unit of product, merging into its existing line."""
        line = self.line_for(product.name)
        if line is None:
            line = CartLine(product=product, quantity=1)
            self._lines.append(line)
        else:
            line.quantity += 1
        logger.info(f"Cart add {product.name} -> x{line.quantity}, subtotal ${self.subtotal()}")
        return line

    def increment_line(self, line: CartLine) -> None:
        self._require(line).quantity += 1
        logger.info(f"Cart increment {line.product.name} -> x{line.quantity}")

    def decrement_line(self, line: CartLine) -> bool:
        """Drop one unit; returns True when the line was removed."""
        line = self._require(line)
        if line.quantity > 1:
            line.quantity -= 1
            logger.info(f"Cart decrement {line.product.name} -> x{line.quantity}")
            return False
        self._lines.remove(line)
        logger.info(f"Cart decrement removed {line.product.name}")
        return True

    def remove_line(self, line: CartLine) -> None:
        self._lines.remove(self._require(line))
        logger.info(f"Cart remove {line.product.name}")

    def clear(self) -> None:
        self._lines.clear()
        logger.info("Cart cleared")

    def subtotal(self) -> Decimal:
        # Recomputed from the lines on every call; there is no running total to drift.
        return sum((line.line_total for line in self._lines), ZERO)

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def _require(self, line: CartLine) -> CartLine:
        for existing in self._lines:
            if existing is line:
                return existing
        raise ValueError(f"{line.product.name!r} is not a line of this cart")
