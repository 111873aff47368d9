"""Logging for halfbars.

Modules log through ``get_logger(__name__)``, so every record lands under the
``halfbars`` logger. Width resolution and panel drawing log at DEBUG.

The package installs only a NullHandler. Scripts that want to see the
records call ``configure_logging()``; applications with their own logging
setup need nothing.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "halfbars"
LOG_LEVEL_ENV = "HALFBARS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None, *, force: bool = False) -> None:
    """Send halfbars records to stderr at ``level``.

    ``level`` defaults to $HALFBARS_LOG_LEVEL, then "INFO". Calling again
    only changes the level unless ``force`` replaces the handlers. The root
    logger is left alone.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    elif any(isinstance(h, logging.StreamHandler) and h.stream is sys.stderr for h in logger.handlers):
        return

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, or the package logger when None."""
    return logging.getLogger(name or LOGGER_NAME)
