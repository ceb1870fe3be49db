"""Utility modules for Scanlet.

Provides:
- logger: get_logger for logging
"""

from scanlet.utils.logger import get_logger

__all__ = [
    "get_logger",
]
