"""Bar width resolution for half error bars.

A bar's width comes from, in order: its own ``width`` value, the layer-level
``width`` parameter, or 0.9 times the resolution of the ``x`` column. The
resolution is computed once over the whole column, so every bar that falls
through to it gets the same width.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from halfbars.utils.helpers import coalesce
from halfbars.utils.logging import get_logger

logger = get_logger(__name__)

# Used when the data cannot provide a resolution (fewer than two distinct x).
DEFAULT_WIDTH = 0.5

# Fraction of the x resolution a data-driven bar covers.
RESOLUTION_FRACTION = 0.9


def resolution(values) -> Optional[float]:
    """Smallest gap between distinct finite values.

    Values are compared as floats, so integer columns are measured like any
    other. Returns None when fewer than two distinct finite values exist.
    """
    arr = np.asarray(values, dtype=float)
    arr = np.unique(arr[np.isfinite(arr)])
    if arr.size < 2:
        return None
    return float(np.min(np.diff(arr)))


def default_width(x) -> float:
    """Width derived from the spacing of ``x``, or DEFAULT_WIDTH if undefined."""
    res = resolution(x)
    if res is None:
        logger.debug("x has no resolution; using DEFAULT_WIDTH=%s", DEFAULT_WIDTH)
        return DEFAULT_WIDTH
    return res * RESOLUTION_FRACTION


def resolve_width(data: pd.DataFrame, width: Optional[float] = None) -> pd.Series:
    """Per-row bar widths, aligned to ``data.index``.

    Args:
        data: Rows with an ``x`` column and optionally a ``width`` column.
        width: Layer-level width, used for rows without their own value.

    Returns:
        Float series with one width per row.
    """
    if "width" in data:
        row_width = data["width"].astype(float)
    else:
        row_width = pd.Series(np.nan, index=data.index, dtype=float)

    missing = row_width.isna()
    if not missing.any():
        return row_width

    fallback = coalesce(width, default_width(data["x"]))
    logger.debug(
        "filling %d of %d widths with %s (%s)",
        int(missing.sum()),
        len(data),
        fallback,
        "layer parameter" if width is not None else "data resolution",
    )
    return row_width.fillna(float(fallback))


def add_x_bounds(data: pd.DataFrame, width: Optional[float] = None) -> pd.DataFrame:
    """Return a copy of ``data`` with ``xmin``/``xmax`` added and ``width`` dropped."""
    out = data.copy()
    half = resolve_width(out, width) / 2
    out["xmin"] = out["x"] - half
    out["xmax"] = out["x"] + half
    return out.drop(columns="width", errors="ignore")
