"""Logging configuration for framediag."""

import logging
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", file: str | None = None) -> None:
    """
    Configure the framediag package logger.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``.
        file: Log to this file instead of stderr.
    """
    handler: logging.FileHandler | logging.StreamHandler[Any]
    handler = logging.FileHandler(file) if file else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("framediag")
    logger.setLevel(level)

    # Close and remove existing handlers
    for old_handler in logger.handlers[:]:
        old_handler.close()
        logger.removeHandler(old_handler)

    logger.addHandler(handler)
    logger.propagate = False
