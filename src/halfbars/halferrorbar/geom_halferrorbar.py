"""plotnine geom drawing error bars that extend only above the data."""

from __future__ import annotations

import typing

import pandas as pd
from plotnine.geoms.geom import geom
from plotnine.geoms.geom_path import geom_path

from halfbars.halferrorbar.path_builder import build_half_errorbar_path
from halfbars.halferrorbar.width import add_x_bounds
from halfbars.utils.logging import get_logger

if typing.TYPE_CHECKING:
    from matplotlib.axes import Axes
    from plotnine.coords.coord import coord
    from plotnine.iapi import panel_view

logger = get_logger(__name__)


class geom_halferrorbar(geom):
    """
    Vertical interval drawn as a half error bar

    Like ``geom_errorbar``, but the bar runs from ``y`` up to ``ymax`` only:
    a horizontal cap at ``ymax`` and a stem down to the data point, with
    nothing below ``y``.

    Parameters
    ----------
    mapping : aes, default=None
        Aesthetic mappings. Required: ``x``, ``y``, ``ymax``. Optional:
        ``alpha``, ``color``, ``group``, ``linetype``, ``size``, ``width``.
    data : DataFrame, default=None
        Layer data; the plot data is used when None.
    stat : str | stat, default="identity"
        Statistical transformation.
    position : str | position, default="identity"
        Position adjustment.
    na_rm : bool, default=False
        If False, rows missing a required aesthetic are removed with a
        warning. If True they are removed silently.
    width : float, default=None
        Bar width in data units, used for rows without a ``width`` of their
        own. When None, 0.9 times the smallest gap between distinct ``x``
        values is used, or 0.5 if ``x`` has fewer than two distinct values.
    lineend : str, default="butt"
        Line end style passed to the path renderer; one of ``"butt"``,
        ``"round"`` or ``"projecting"``.
    show_legend : bool | dict, default=None
        Whether to include the layer in legends. None includes it when any
        aesthetic is mapped.
    inherit_aes : bool, default=True
        If False, do not combine with the plot's default mapping.
    **kwargs
        Fixed aesthetics, e.g. ``color="blue"``.
    """

    DEFAULT_AES = {
        "alpha": 1,
        "color": "red",
        "linetype": "solid",
        "size": 0.5,
        "width": 0.5,
    }
    REQUIRED_AES = {"x", "y", "ymax"}
    DEFAULT_PARAMS = {
        "stat": "identity",
        "position": "identity",
        "na_rm": False,
        "width": None,
        "lineend": "butt",
    }

    draw_legend = staticmethod(geom_path.draw_legend)

    def setup_data(self, data: pd.DataFrame) -> pd.DataFrame:
        return add_x_bounds(data, self.params["width"])

    def draw_panel(
        self,
        data: pd.DataFrame,
        panel_params: panel_view,
        coord: coord,
        ax: Axes,
    ):
        path_data = build_half_errorbar_path(data)
        logger.debug("drawing %d half error bars as %d path vertices", len(data), len(path_data))
        return self._path_renderer().draw_panel(path_data, panel_params, coord, ax)

    def _path_renderer(self) -> geom_path:
        # Layer-assigned params (zorder, raster, na_rm) must reach the path geom.
        path = geom_path()
        path.params.update(self.params)
        return path
