"""Logging setup for the simulator and its host."""

from __future__ import annotations

import logging
import os

from monty_hall.config import LOG_LEVEL_ENV

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Optional explicit log level. Falls back to ``MONTY_LOG_LEVEL``
            or INFO when not provided.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The ``monty_hall`` package logger.
    """

    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("monty_hall")
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
