"""Vertex table construction for half error bars.

Each prepared bar becomes five path vertices::

    (xmin, ymax) -> (xmax, ymax) -> (NaN, NaN) -> (x, ymax) -> (x, y)

The NaN row lifts the pen, so one path per bar draws the horizontal cap and
the vertical stem as two disconnected segments. All five vertices share the
bar's styling and a group id unique to that bar.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

VERTICES_PER_BAR = 5

# Per-bar styling copied onto every vertex, when present.
STYLE_COLUMNS = ("color", "alpha", "size", "linetype")


def build_half_errorbar_path(data: pd.DataFrame) -> pd.DataFrame:
    """Expand prepared bars into a path vertex table.

    Args:
        data: Prepared rows with ``x``, ``y``, ``ymax``, ``xmin`` and ``xmax``.

    Returns:
        DataFrame with ``VERTICES_PER_BAR`` rows per input row and columns
        ``x``, ``y``, ``group`` plus any STYLE_COLUMNS found in ``data``.
        Group ids run from 1 in input order.
    """
    n = len(data)
    nan = np.full(n, np.nan)
    x = data["x"].to_numpy(dtype=float)
    ymax = data["ymax"].to_numpy(dtype=float)

    xs = np.column_stack([data["xmin"].to_numpy(dtype=float), data["xmax"].to_numpy(dtype=float), nan, x, x])
    ys = np.column_stack([ymax, ymax, nan, ymax, data["y"].to_numpy(dtype=float)])

    columns = {
        "x": xs.ravel(),
        "y": ys.ravel(),
    }
    for col in STYLE_COLUMNS:
        if col in data:
            columns[col] = np.repeat(data[col].to_numpy(), VERTICES_PER_BAR)
    columns["group"] = np.repeat(np.arange(1, n + 1), VERTICES_PER_BAR)

    return pd.DataFrame(columns)
