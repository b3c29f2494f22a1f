"""Rendering helpers that turn kiosk state into rich Text."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from PIL import Image
from rich.color import Color
from rich.style import Style
from rich.text import Text

from kiosk.animation import FloatingMarker
from kiosk.models import CartLine, CheckoutTotals, OrderType, Product

BRAND_RED = (180, 30, 30)
ADD_GREEN = (40, 160, 40)
HALF_BLOCK = "▀"


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def badge_style(order_type: OrderType) -> str:
    """Return a consistent badge style for the order type tag."""
    if order_type is OrderType.TAKE_OUT:
        return "bold #0b1f0f on #ffc800"
    return "bold #ffffff on #b41e1e"


def format_order_type(order_type: OrderType) -> Text:
    text = Text("Order Type: ")
    text.append(f" {order_type.value} ", style=badge_style(order_type))
    return text


def format_product(product: Product) -> Text:
    text = Text()
    text.append(product.name, style="bold #8c1414")
    text.append(f"  {format_money(product.price)}\n", style="bold")
    text.append(product.description, style="#505050")
    return text


def format_cart_line(line: CartLine) -> Text:
    text = Text()
    text.append(line.product.name, style="bold")
    text.append(f"\n{format_money(line.line_total)}", style="#8c1414")
    return text


def format_summary_lines(lines: Iterable[CartLine]) -> Text:
    text = Text()
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        text.append(f"{line.quantity}x {line.product.name}")
        text.append(f"  {format_money(line.line_total)}", style="bold")
    return text


def format_totals(totals: CheckoutTotals) -> Text:
    rows: list[tuple[str, str, str]] = [
        ("Subtotal", format_money(totals.subtotal), ""),
        ("Tax (8%)", format_money(totals.tax), ""),
    ]
    if totals.discount_applied:
        rows.append(("Loyalty Discount", f"-{format_money(totals.discount)}", "#28a028"))
    rows.append(("Total", format_money(totals.total), "bold #8c1414"))

    text = Text()
    for idx, (label, value, style) in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append(f"{label:<18}", style=style)
        text.append(f"{value:>10}", style=style)
    return text


def image_to_text(img: Image.Image, width: int, height: int) -> Text:
    """Render an image as width x height terminal cells, two pixels per cell."""
    small = img.convert("RGB").resize((max(1, width), max(1, height) * 2))
    pixels = small.load()
    text = Text()
    for row in range(max(1, height)):
        if row > 0:
            text.append("\n")
        for col in range(max(1, width)):
            top = pixels[col, row * 2]
            bottom = pixels[col, row * 2 + 1]
            text.append(HALF_BLOCK, style=Style(color=Color.from_rgb(*top), bgcolor=Color.from_rgb(*bottom)))
    return text


def _blend(rgb: tuple[int, int, int], amount: float) -> str:
    # Fade toward the light kiosk background.
    r, g, b = (int(248 + (channel - 248) * amount) for channel in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def render_marker_lane(markers: Iterable[FloatingMarker], width: int, height: int) -> Text:
    """Draw feedback markers into a width x height character grid."""
    width = max(1, width)
    height = max(1, height)
    grid: list[list[tuple[str, str]]] = [[(" ", "")] * width for _ in range(height)]
    for marker in markers:
        row = int(marker.y)
        if not (0 <= row < height and 0 <= marker.x < width):
            continue
        colour = _blend(ADD_GREEN if marker.is_addition else BRAND_RED, marker.opacity)
        grid[row][marker.x] = (marker.glyph, f"bold {colour}")

    text = Text()
    for row_idx, row in enumerate(grid):
        if row_idx > 0:
            text.append("\n")
        for glyph, style in row:
            text.append(glyph, style=style or None)
    return text


def pulse_style(scale: float) -> str:
    """Map the logo pulse scale to a brand-red shade."""
    # 0.95 -> darkest, 1.05 -> brightest.
    amount = min(1.0, max(0.0, (scale - 0.95) / 0.10))
    r = int(140 + (220 - 140) * amount)
    g = int(20 + (50 - 20) * amount)
    return f"bold #{r:02x}{g:02x}{g:02x}"
