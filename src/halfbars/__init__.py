"""
halfbars: half error bars for plotnine.

This package provides:
- geom_halferrorbar: a plotnine geom drawing error bars that extend only
  above the data point
- halferrorbar_layer: a factory returning the same geom as a plotnine layer
- Logging utilities for library and script use

For logging configuration in standalone scripts:
    ```python
    from halfbars.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from halfbars.utils.logging import configure_logging, get_logger

from halfbars.halferrorbar import geom_halferrorbar, halferrorbar_layer

# NullHandler keeps halfbars logs off the root logger until an application
# or script configures logging.
_logger = logging.getLogger("halfbars")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "configure_logging",
    "geom_halferrorbar",
    "get_logger",
    "halferrorbar_layer",
]

__version__ = "0.1.0"
