"""AnyGraph core

Paste loosely structured numeric text, get a chart. ``parse`` infers a
dataset from freeform text, ``compute_bounds``/``compute_scale`` derive a
unified-scale square plot, and ``paint`` draws it onto a surface.
"""

from anygraph.config import Config, get_default_graph_config
from anygraph.graph_config import GraphConfig, RenderConfig, ScaleConfig, SeriesStyle
from anygraph.models import (
    Bounds,
    Dataset,
    ParseResult,
    Point,
    PointsDataset,
    Scale,
    ValuesDataset,
)
from anygraph.parsing import ClassificationRule, DataParser, describe_dataset, parse, to_text
from anygraph.render import (
    CanvasPainter,
    GraphRenderer,
    MatplotlibSurface,
    Surface,
    compute_bounds,
    compute_scale,
    next_pow2,
    paint,
)
from anygraph.session import GraphSession

__all__ = [
    "Bounds",
    "CanvasPainter",
    "ClassificationRule",
    "Config",
    "DataParser",
    "Dataset",
    "GraphConfig",
    "GraphRenderer",
    "GraphSession",
    "MatplotlibSurface",
    "ParseResult",
    "Point",
    "PointsDataset",
    "RenderConfig",
    "Scale",
    "ScaleConfig",
    "SeriesStyle",
    "Surface",
    "ValuesDataset",
    "compute_bounds",
    "compute_scale",
    "describe_dataset",
    "get_default_graph_config",
    "next_pow2",
    "paint",
    "parse",
    "to_text",
]
