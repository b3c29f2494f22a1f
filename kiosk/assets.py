"""Product image store with generated placeholder fallback."""

from __future__ import annotations

import hashlib
import logging
import math
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from kiosk.config import (
    PLACEHOLDER_CAPTION_FONT_SIZE,
    PLACEHOLDER_FONT_SIZE,
    PLACEHOLDER_SIZE_PX,
    resolve_asset_dir,
    resolve_placeholder_font_path,
)
from kiosk.models import Product

logger = logging.getLogger(__name__)

BRAND_RED = (180, 30, 30)
BRAND_DARK_RED = (140, 20, 20)
WHITE = (255, 255, 255)
BREAD = (240, 220, 180)
BORDER_GRAY = (220, 220, 220)
CAPTION = "Replace with your own image"


class AssetStore:
    """Image bytes keyed by a product's image reference, rooted at the asset directory."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root) if root is not None else resolve_asset_dir()

    def path_for(self, ref: str) -> Path:
        return self.root / ref

    def load(self, ref: str) -> bytes | None:
        path = self.path_for(ref)
        if not path.is_file():
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.warning(f"Asset {ref} unreadable: {exc}")
            return None

    def save(self, ref: str, data: bytes) -> bool:
        path = self.path_for(ref)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            logger.warning(f"Asset {ref} not saved: {exc}")
            return False
        return True


def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    font_path = resolve_placeholder_font_path()
    if font_path is not None:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError as exc:
            logger.warning(f"Placeholder font {font_path} unusable: {exc}")
    return ImageFont.load_default()


def _accent_for(name: str) -> tuple[int, int, int]:
    """A name-derived tint of the brand red; identical names always get identical colours."""
    digest = hashlib.sha1(name.encode("utf-8")).digest()
    return (
        min(255, BRAND_RED[0] + digest[0] % 40),
        min(255, BRAND_RED[1] + digest[1] % 40),
        min(255, BRAND_RED[2] + digest[2] % 40),
    )


def _fit_text_to_px(text: str, draw: ImageDraw.ImageDraw, font: object, max_width_px: int) -> str:
    if draw.textbbox((0, 0), text, font=font)[2] <= max_width_px:
        return text
    ellipsis = "..."
    trimmed = text
    while trimmed:
        candidate = f"{trimmed}{ellipsis}"
        if draw.textbbox((0, 0), candidate, font=font)[2] <= max_width_px:
            return candidate
        trimmed = trimmed[:-1]
    return ellipsis


def _draw_centered(draw: ImageDraw.ImageDraw, text: str, font: object, width: int, y: int, fill: tuple[int, int, int]) -> None:
    text = _fit_text_to_px(text, draw, font, width - 10)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (width - (bbox[2] - bbox[0])) // 2 - bbox[0]
    draw.text((x, y - bbox[1]), text, font=font, fill=fill)


def _draw_category_icon(draw: ImageDraw.ImageDraw, category: str, width: int, height: int, color: tuple[int, int, int]) -> None:
    cx = width // 2
    cy = height // 2 - height // 10
    size = width // 3
    half = size // 2
    quarter = size // 4

    if category == "Coffee":
        draw.rounded_rectangle((cx - half, cy - half, cx + half, cy + half), radius=10, fill=color)
        draw.ellipse((cx - quarter, cy - quarter, cx + quarter, cy + quarter), fill=WHITE)
        draw.rounded_rectangle((cx + half, cy - quarter, cx + half + size // 6, cy + quarter), radius=5, fill=color)
    elif category == "Tea":
        third = size // 3
        draw.rounded_rectangle((cx - half, cy - third, cx + half, cy - third + half), radius=10, fill=color)
        draw.ellipse((cx - quarter, cy - size // 6, cx + quarter, cy - size // 6 + quarter), fill=WHITE)
        draw.rectangle((cx - half - size // 10, cy - third - size // 10, cx - half + size // 10, cy - third - size // 20), fill=color)
    elif category == "Pastries":
        stroke = max(2, size // 10)
        for radius in (half, size // 3, quarter):
            draw.arc((cx - radius, cy - radius, cx + radius, cy + radius), 180, 360, fill=color, width=stroke)
    elif category == "Sandwiches":
        draw.rounded_rectangle((cx - half, cy - quarter, cx + half, cy + quarter), radius=10, fill=color)
        draw.rounded_rectangle((cx - half + 5, cy - quarter + 5, cx + half - 5, cy + quarter - 5), radius=5, fill=BREAD)
        draw.rectangle((cx - size // 3, cy - 5, cx + size // 3, cy + 5), fill=color)
    elif category == "Smoothies":
        draw.rounded_rectangle((cx - quarter, cy - half, cx + quarter, cy + half), radius=20, fill=color)
        draw.rounded_rectangle((cx - quarter + 5, cy - half + 5, cx + quarter - 5, cy - half + size // 3), radius=15, fill=WHITE)
        draw.rectangle((cx - size // 3, cy + half - 10, cx + size // 3, cy + half), fill=color)
    elif category == "Seasonal":
        # Snowflake: six arms, each with a small fork at the tip.
        stroke = max(2, size // 20)
        twig = size // 6
        for arm in range(6):
            angle = math.radians(arm * 60)
            x1 = cx + int(math.cos(angle) * half)
            y1 = cy + int(math.sin(angle) * half)
            draw.line((cx, cy, x1, y1), fill=color, width=stroke)
            for offset in (60, -60):
                fork = angle + math.radians(offset)
                draw.line((x1, y1, x1 + int(math.cos(fork) * twig), y1 + int(math.sin(fork) * twig)), fill=color, width=stroke)
    else:
        draw.ellipse((cx - half, cy - half, cx + half, cy + half), fill=color)
        draw.ellipse((cx - quarter, cy - quarter, cx + quarter, cy + quarter), fill=WHITE)


def render_placeholder(name: str, category: str, size: tuple[int, int] = PLACEHOLDER_SIZE_PX) -> Image.Image:
    """Draw the stand-in artwork for a product without a photo."""
    width, height = size
    img = Image.new("RGB", size, color=(250, 250, 250))
    draw = ImageDraw.Draw(img)

    for y in range(height):
        shade = 250 - (10 * y) // max(1, height - 1)
        draw.line((0, y, width, y), fill=(shade, shade, shade))

    _draw_category_icon(draw, category, width, height, _accent_for(name))
    _draw_centered(draw, name, _load_font(PLACEHOLDER_FONT_SIZE), width, height - 80 * height // 300, BRAND_DARK_RED)
    _draw_centered(draw, CAPTION, _load_font(PLACEHOLDER_CAPTION_FONT_SIZE), width, height - 50 * height // 300, BRAND_DARK_RED)
    draw.rectangle((0, 0, width - 1, height - 1), outline=BORDER_GRAY)
    return img


def encode_jpeg(img: Image.Image) -> bytes:
    buffer = BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=90)
    return buffer.getvalue()


def load_product_image(product: Product, store: AssetStore, persist: bool = True) -> Image.Image:
    """
    Return the product's image, falling back to its placeholder.

    A missing image is generated and, when persist is set, written back so the
    next lookup hits the store. Unreadable files are left in place.
    """
    data = store.load(product.image_ref)
    if data is not None:
        try:
            with Image.open(BytesIO(data)) as opened:
                return opened.convert("RGB")
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning(f"Asset {product.image_ref} is not a usable image: {exc}")

    logger.info(f"Using placeholder for {product.name}")
    img = render_placeholder(product.name, product.category)
    if persist and data is None:
        store.save(product.image_ref, encode_jpeg(img))
    return img


def ensure_placeholders(products: Iterable[Product], store: AssetStore) -> int:
    """Write placeholders for every product image missing from the store; returns how many."""
    created = 0
    for product in products:
        if store.path_for(product.image_ref).exists():
            continue
        img = render_placeholder(product.name, product.category)
        if store.save(product.image_ref, encode_jpeg(img)):
            logger.info(f"Created placeholder image {store.path_for(product.image_ref)}")
            created += 1
    return created
