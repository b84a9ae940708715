"""Canvas painter

Draws grid, axes with scale labels, and the dataset onto a Surface. Each
paint call is a pure function of its inputs: the surface is cleared first
and no state is kept between calls.
"""

from typing import Dict, List, Optional, Union

from anygraph.config import create_default_logger
from anygraph.graph_config import GraphConfig
from anygraph.handlers import LineSeriesHandler, ScatterSeriesHandler, SeriesHandler
from anygraph.handlers.base import DataPoint
from anygraph.logger import Logger
from anygraph.models import PointsDataset, Scale, ValuesDataset
from anygraph.render.scale import format_scale_label
from anygraph.render.surface import Surface

GRID_DIVISIONS = 5
GRID_LINE_WIDTH = 1.0
AXIS_LINE_WIDTH = 2.0
LABEL_GAP = 12.0


class CanvasPainter:
    """Main painter that delegates series drawing to per-chart-type handlers"""

    def __init__(self, logger: Optional[Logger] = None):
        line = LineSeriesHandler()
        self.default_handler: SeriesHandler = line
        self.handlers: Dict[str, SeriesHandler] = {
            "line": line,
            "scatter": ScatterSeriesHandler(),
            "quadrant": line,
            "quadrant-inverted": line,
        }
        self.logger = logger or create_default_logger("anygraph.painter")

    def paint(
        self,
        surface: Surface,
        dataset: Union[ValuesDataset, PointsDataset],
        scale: Scale,
        config: GraphConfig,
    ) -> None:
        """
        Draw a full frame

        Args:
            surface: Caller-owned surface to draw into
            dataset: Values or points to plot
            scale: Pixel mapping from ``compute_scale``
            config: Chart type, colors, toggles and series styles
        """
        render = config.render
        inverted = config.is_inverted

        surface.clear(render.background_color)

        if render.show_grid:
            self._draw_grid(surface, scale, render.grid_color, inverted)

        if render.show_axes:
            self._draw_axes(surface, scale, render.axis_color, inverted)

        self._draw_data(surface, dataset, scale, config)

    def _draw_grid(self, surface: Surface, scale: Scale, color: str, inverted: bool) -> None:
        top = scale.offset_y
        bottom = scale.offset_y + scale.plot_size
        left = scale.offset_x
        right = scale.offset_x + scale.plot_size
        x_step = scale.span / GRID_DIVISIONS
        y_step = scale.span / GRID_DIVISIONS

        for i in range(GRID_DIVISIONS + 1):
            px = scale.to_pixel_x(scale.x_min + i * x_step)
            surface.draw_line(px, top, px, bottom, color, GRID_LINE_WIDTH)

        for i in range(GRID_DIVISIONS + 1):
            py = scale.to_pixel_y(scale.y_min + i * y_step, inverted)
            surface.draw_line(left, py, right, py, color, GRID_LINE_WIDTH)

    def _draw_axes(self, surface: Surface, scale: Scale, color: str, inverted: bool) -> None:
        left = scale.offset_x
        right = scale.offset_x + scale.plot_size

        x_axis_y = scale.to_pixel_y(0.0, inverted)
        if scale.contains_pixel_y(x_axis_y):
            surface.draw_line(left, x_axis_y, right, x_axis_y, color, AXIS_LINE_WIDTH)
            surface.draw_text(
                right + LABEL_GAP / 2,
                x_axis_y,
                format_scale_label(scale.span),
                color,
                align="left",
            )

        y_axis_x = scale.to_pixel_x(0.0)
        if scale.contains_pixel_x(y_axis_x):
            top = scale.offset_y
            bottom = scale.offset_y + scale.plot_size
            surface.draw_line(y_axis_x, top, y_axis_x, bottom, color, AXIS_LINE_WIDTH)

            # Label sits past the y_max end, which is the bottom when inverted
            far_end = scale.to_pixel_y(scale.y_max, inverted)
            label_y = far_end + LABEL_GAP if inverted else far_end - LABEL_GAP
            surface.draw_text(
                y_axis_x,
                label_y,
                format_scale_label(scale.span),
                color,
                align="center",
            )

    def _draw_data(
        self,
        surface: Surface,
        dataset: Union[ValuesDataset, PointsDataset],
        scale: Scale,
        config: GraphConfig,
    ) -> None:
        handler = self.handlers.get(config.type, self.default_handler)

        if dataset.data_type == "values":
            series_points: List[List[DataPoint]] = [
                [(float(index), value) for index, value in enumerate(series)]
                for series in dataset.values
            ]
        else:
            series_points = [[(p.x, p.y) for p in series] for series in dataset.points]

        drawn = 0
        for index, points in enumerate(series_points):
            style = config.series_style(index)
            if not style.visible or not points:
                continue
            handler.draw(surface, scale, points, style.color, config.is_inverted)
            drawn += 1

        self.logger.debug(
            "Painted dataset",
            chart_type=config.type,
            data_type=dataset.data_type,
            series_drawn=drawn,
        )


def paint(
    surface: Surface,
    dataset: Union[ValuesDataset, PointsDataset],
    scale: Scale,
    config: GraphConfig,
) -> None:
    CanvasPainter().paint(surface, dataset, scale, config)
