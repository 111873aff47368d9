"""Half error bar geom for plotnine."""

from halfbars.halferrorbar.factory import halferrorbar_layer
from halfbars.halferrorbar.geom_halferrorbar import geom_halferrorbar
from halfbars.halferrorbar.path_builder import VERTICES_PER_BAR, build_half_errorbar_path
from halfbars.halferrorbar.width import DEFAULT_WIDTH, add_x_bounds, default_width, resolution, resolve_width

__all__ = [
    "DEFAULT_WIDTH",
    "VERTICES_PER_BAR",
    "add_x_bounds",
    "build_half_errorbar_path",
    "default_width",
    "geom_halferrorbar",
    "halferrorbar_layer",
    "resolution",
    "resolve_width",
]
