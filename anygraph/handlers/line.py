from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from anygraph.models import Scale
    from anygraph.render.surface import Surface

from anygraph.handlers.base import DataPoint, SeriesHandler


class LineSeriesHandler(SeriesHandler):
    """Connected polyline through the points in their given order"""

    def __init__(self, line_width: float = 2.0):
        self.line_width = line_width

    def draw(
        self,
        surface: "Surface",
        scale: "Scale",
        points: Sequence[DataPoint],
        color: str,
        inverted: bool = False,
    ) -> None:
        if not points:
            return
        surface.draw_polyline(self.to_pixels(scale, points, inverted), color, self.line_width)
