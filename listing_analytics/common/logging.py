"""Logging configuration for the listing analytics tools."""

from __future__ import annotations

import logging
import sys


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = "listing_analytics",
) -> logging.Logger:
    """Configure and return a logger writing to stdout.

    Calling it again for the same name returns the already configured
    logger without stacking handlers.

    Args:
        level: Logging level, as an int or a name such as ``"DEBUG"``.
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    return logger
