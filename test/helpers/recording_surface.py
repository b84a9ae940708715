"""Surface test double that records every drawing call

Each call is stored as a tuple ``(operation, *arguments)`` so tests can
assert on what the painter drew without rasterizing anything.
"""

from typing import List, Sequence, Tuple

from anygraph.render.surface import PixelPoint, Surface


class RecordingSurface(Surface):
    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.calls: List[Tuple] = []

    def clear(self, color: str) -> None:
        self.calls.append(("clear", color))

    def draw_line(self, x0, y0, x1, y1, color, width=1.0) -> None:
        self.calls.append(("line", x0, y0, x1, y1, color, width))

    def draw_polyline(self, points: Sequence[PixelPoint], color: str, width: float = 2.0) -> None:
        self.calls.append(("polyline", list(points), color, width))

    def fill_circle(self, cx, cy, radius, color) -> None:
        self.calls.append(("circle", cx, cy, radius, color))

    def draw_text(self, x, y, text, color, align="left") -> None:
        self.calls.append(("text", x, y, text, color, align))

    def of(self, operation: str) -> List[Tuple]:
        """All recorded calls of one operation, in order"""
        return [call for call in self.calls if call[0] == operation]
