"""Runtime configuration defaults for the kiosk, assets and animations."""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

SHOP_NAME = "Bispos Bon Appétit"

ASSET_DIR = "images"
_ASSET_DIR_ENV = "KIOSK_ASSET_DIR"

DEBUG_LOG_PATH = "/tmp/brew-kiosk.log"
LOG_LEVEL = "INFO"

# Pricing and loyalty rules.
TAX_RATE = Decimal("0.08")
LOYALTY_SEED_POINTS = 150
LOYALTY_REDEEM_POINTS = 100
LOYALTY_REDEEM_VALUE = Decimal("5.00")
ORDER_NUMBER_RANGE = (1000, 1999)

# Placeholder artwork.
PLACEHOLDER_SIZE_PX = (300, 300)
PLACEHOLDER_FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"
PLACEHOLDER_FONT_SIZE = 18
PLACEHOLDER_CAPTION_FONT_SIZE = 14
THUMBNAIL_CELLS = (12, 6)

# Feedback markers float up a narrow lane on the right edge.
MARKER_TICK_SECONDS = 1 / 60
MARKER_START_ALPHA = 255
MARKER_FADE_PER_TICK = 5
MARKER_RISE_PER_TICK = 0.3
MARKER_LANE_WIDTH = 5

# Screen fade: 10 steps out, switch, 10 steps in.
FADE_TICK_SECONDS = 0.03
FADE_STEP_PERCENT = 10

# Welcome logo pulse, in thousandths of the base scale.
PULSE_TICK_SECONDS = 0.05
PULSE_STEP_MILLI = 2
PULSE_MIN_MILLI = 950
PULSE_MAX_MILLI = 1050

_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def resolve_asset_dir() -> Path:
    """Return the asset directory, honouring KIOSK_ASSET_DIR when set."""
    override = os.environ.get(_ASSET_DIR_ENV, "").strip()
    return Path(override or ASSET_DIR)


def resolve_placeholder_font_path() -> str | None:
    """First installed font among the default and known fallbacks, or None for Pillow's bitmap font."""
    return next((path for path in (PLACEHOLDER_FONT_PATH, *_FONT_FALLBACKS) if Path(path).is_file()), None)
