"""Logging configuration using loguru.

Call setup_logging() once at startup; modules log through loguru's
``logger`` directly.
"""

import sys

from loguru import logger


def setup_logging(level: str = "WARNING", fmt: str = "<level>[{level.name}]</level> {message}") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        fmt: Loguru format string.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)
