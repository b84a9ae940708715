from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:
    from anygraph.models import Scale
    from anygraph.render.surface import Surface

DataPoint = Tuple[float, float]


class SeriesHandler(ABC):
    """Draws one series of data-space points onto a surface"""

    @abstractmethod
    def draw(
        self,
        surface: "Surface",
        scale: "Scale",
        points: Sequence[DataPoint],
        color: str,
        inverted: bool = False,
    ) -> None:
        """Map ``points`` through ``scale`` and draw them in ``color``"""

    @staticmethod
    def to_pixels(
        scale: "Scale", points: Sequence[DataPoint], inverted: bool
    ) -> list[tuple[float, float]]:
        return [(scale.to_pixel_x(x), scale.to_pixel_y(y, inverted)) for x, y in points]
