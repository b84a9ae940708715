from anygraph.handlers.base import SeriesHandler
from anygraph.handlers.line import LineSeriesHandler
from anygraph.handlers.scatter import ScatterSeriesHandler

__all__ = [
    "SeriesHandler",
    "LineSeriesHandler",
    "ScatterSeriesHandler",
]
