"""Small helpers shared across halfbars."""

from __future__ import annotations

from typing import Any


def coalesce(*values: Any) -> Any:
    """Return the first value that is not None, or None if every value is.

    Only ``None`` counts as missing; ``0``, ``False`` and empty containers are
    returned as-is.
    """
    for value in values:
        if value is not None:
            return value
    return None
