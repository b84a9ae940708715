"""Rendering module

Scale computation, the canvas painter and drawing surfaces.
"""

from anygraph.render.painter import CanvasPainter, paint
from anygraph.render.renderer import GraphRenderer
from anygraph.render.scale import (
    MARGIN,
    compute_bounds,
    compute_scale,
    format_scale_label,
    next_pow2,
    normalize_bounds,
)
from anygraph.render.surface import SUPPORTED_FORMATS, MatplotlibSurface, Surface

__all__ = [
    "CanvasPainter",
    "GraphRenderer",
    "MARGIN",
    "MatplotlibSurface",
    "SUPPORTED_FORMATS",
    "Surface",
    "compute_bounds",
    "compute_scale",
    "format_scale_label",
    "next_pow2",
    "normalize_bounds",
    "paint",
]
