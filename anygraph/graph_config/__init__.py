"""Graph configuration module

Chart kind, scale, render and series style settings.
"""

from anygraph.graph_config.params import (
    CHART_TYPES,
    DEFAULT_SERIES_COLOR,
    QUADRANT_TYPES,
    ChartType,
    GraphConfig,
    RenderConfig,
    ScaleConfig,
    SeriesStyle,
)

__all__ = [
    "CHART_TYPES",
    "DEFAULT_SERIES_COLOR",
    "QUADRANT_TYPES",
    "ChartType",
    "GraphConfig",
    "RenderConfig",
    "ScaleConfig",
    "SeriesStyle",
]
