"""Entry point for the coffee-shop kiosk Textual app."""

from __future__ import annotations

import logging

from kiosk.kiosk_app import KioskApp
from kiosk.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    logger.info("Kiosk starting")
    KioskApp().run()


if __name__ == "__main__":
    main()
