"""Drawing surfaces

The painter draws through the small ``Surface`` interface in canvas pixel
coordinates (origin top-left, y growing downward). ``MatplotlibSurface``
implements it on a matplotlib figure and exports the result as an image.
"""

import base64
import io
from abc import ABC, abstractmethod
from typing import Literal, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from anygraph.exceptions import RenderError  # noqa: E402

PixelPoint = Tuple[float, float]
TextAlign = Literal["left", "center", "right"]

SUPPORTED_FORMATS = ["png", "jpg", "svg", "pdf"]


class Surface(ABC):
    """Caller-owned 2D canvas of a fixed pixel size"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    @abstractmethod
    def clear(self, color: str) -> None:
        """Erase everything and fill the whole canvas with ``color``"""

    @abstractmethod
    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, color: str, width: float = 1.0
    ) -> None:
        pass

    @abstractmethod
    def draw_polyline(self, points: Sequence[PixelPoint], color: str, width: float = 2.0) -> None:
        """Connect ``points`` in order with one stroke"""

    @abstractmethod
    def fill_circle(self, cx: float, cy: float, radius: float, color: str) -> None:
        pass

    @abstractmethod
    def draw_text(
        self, x: float, y: float, text: str, color: str, align: TextAlign = "left"
    ) -> None:
        pass


class MatplotlibSurface(Surface):
    """
    Surface backed by a borderless matplotlib figure

    The single axes fills the figure and maps one data unit to one pixel with
    the origin at the top-left, so painter coordinates pass through
    unchanged. Call ``close()`` when done to free the figure.
    """

    def __init__(self, width: int, height: int, dpi: int = 100, font_size: float = 10):
        super().__init__(width, height)
        self.dpi = dpi
        self.font_size = font_size
        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.ax = self.fig.add_axes((0, 0, 1, 1))
        self._reset_axes()

    def _reset_axes(self) -> None:
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_axis_off()
        self.ax.set_autoscale_on(False)

    def _points(self, pixels: float) -> float:
        """Line widths are given in pixels; matplotlib wants points"""
        return pixels * 72.0 / self.dpi

    def clear(self, color: str) -> None:
        self.ax.cla()
        self._reset_axes()
        self.fig.patch.set_facecolor(color)
        self.ax.set_facecolor(color)

    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, color: str, width: float = 1.0
    ) -> None:
        self.ax.plot([x0, x1], [y0, y1], color=color, linewidth=self._points(width))

    def draw_polyline(self, points: Sequence[PixelPoint], color: str, width: float = 2.0) -> None:
        if not points:
            return
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.ax.plot(xs, ys, color=color, linewidth=self._points(width))

    def fill_circle(self, cx: float, cy: float, radius: float, color: str) -> None:
        self.ax.add_patch(Circle((cx, cy), radius, facecolor=color, edgecolor="none"))

    def draw_text(
        self, x: float, y: float, text: str, color: str, align: TextAlign = "left"
    ) -> None:
        self.ax.text(
            x, y, text, color=color, fontsize=self.font_size, ha=align, va="center"
        )

    def to_bytes(self, format: str = "png") -> bytes:
        """
        Export the canvas as an image

        Raises:
            ValueError: If the format is not supported
            RenderError: If matplotlib fails to write the image
        """
        if format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported image format '{format}'. Use one of: {', '.join(SUPPORTED_FORMATS)}"
            )
        buf = io.BytesIO()
        try:
            self.fig.savefig(buf, format=format, dpi=self.dpi, facecolor=self.fig.get_facecolor())
            return buf.getvalue()
        except Exception as e:
            raise RenderError(f"Failed to save image to buffer: {str(e)}")
        finally:
            buf.close()

    def to_base64(self, format: str = "png") -> str:
        return base64.b64encode(self.to_bytes(format)).decode("utf-8")

    def close(self) -> None:
        plt.close(self.fig)

    def __enter__(self) -> "MatplotlibSurface":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
