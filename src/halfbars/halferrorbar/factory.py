"""Layer factory for half error bars."""

from __future__ import annotations

from typing import Any, Optional

from plotnine.layer import layer

from halfbars.halferrorbar.geom_halferrorbar import geom_halferrorbar


def halferrorbar_layer(
    mapping=None,
    data=None,
    *,
    stat: Any = "identity",
    position: Any = "identity",
    na_rm: bool = False,
    show_legend: Optional[bool] = None,
    inherit_aes: bool = True,
    **kwargs: Any,
) -> layer:
    """Build a plotnine layer drawing half error bars.

    Arguments are forwarded unchanged to :class:`geom_halferrorbar`; extra
    keyword arguments are fixed aesthetics (``color="blue"``) or geom
    parameters (``width=0.3``). Nothing is drawn until the plot is rendered.

    Returns:
        A layer that can be added to a ``ggplot`` object.
    """
    g = geom_halferrorbar(
        mapping,
        data,
        stat=stat,
        position=position,
        na_rm=na_rm,
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        **kwargs,
    )
    return layer.from_geom(g)
