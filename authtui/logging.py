from __future__ import annotations

import logging
from typing import Optional

from .config import getenv

PACKAGE_LOGGER = "authtui"
DEFAULT_LEVEL = logging.WARNING


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(getenv("AUTHTUI_LOG_LEVEL", "WARNING").upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Set up the ``authtui`` logger that every module logger reports through.

    Records go to stderr only, since stdout carries the code table. The level
    comes from ``level`` or AUTHTUI_LOG_LEVEL (default WARNING). Calling again
    only changes the level.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under ``authtui``; configures the package logger on first use."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)
