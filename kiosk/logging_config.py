"""Logging setup: a debug file plus the Textual devtools console."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from kiosk.config import DEBUG_LOG_PATH, LOG_LEVEL

_LOGGING_CONFIGURED = False
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str | Path = DEBUG_LOG_PATH) -> None:
    """Route kiosk logs to a file; the terminal belongs to the UI, so nothing goes to stdout."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(LOG_LEVEL)

    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(TextualHandler())

    # PIL logs every plugin import at DEBUG.
    logging.getLogger("PIL").setLevel(logging.INFO)

    _LOGGING_CONFIGURED = True
