"""Minimal logging utilities for Scanlet.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from scanlet.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanner exhausted at offset %d", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "scanlet." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'scanlet.mymodule'
    """
    if not (name == "scanlet" or name.startswith("scanlet.")):
        name = f"scanlet.{name}"
    return logging.getLogger(name)
