"""Shared utilities: logging setup and small helpers."""

from halfbars.utils.helpers import coalesce
from halfbars.utils.logging import configure_logging, get_logger

__all__ = [
    "coalesce",
    "configure_logging",
    "get_logger",
]
