from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from anygraph.models import Scale
    from anygraph.render.surface import Surface

from anygraph.handlers.base import DataPoint, SeriesHandler


class ScatterSeriesHandler(SeriesHandler):
    """Unconnected filled circle per point"""

    def __init__(self, radius: float = 3.0):
        self.radius = radius

    def draw(
        self,
        surface: "Surface",
        scale: "Scale",
        points: Sequence[DataPoint],
        color: str,
        inverted: bool = False,
    ) -> None:
        for px, py in self.to_pixels(scale, points, inverted):
            surface.fill_circle(px, py, self.radius, color)
