"""Graph renderer implementation

Runs one full render pass: validate config, compute bounds and scale, paint
into a fresh matplotlib surface and export the image.
"""

from typing import Optional, Union

from anygraph.config import create_default_logger
from anygraph.exceptions import ConfigurationError
from anygraph.graph_config import GraphConfig
from anygraph.logger import Logger
from anygraph.models import PointsDataset, ValuesDataset
from anygraph.render.painter import CanvasPainter
from anygraph.render.scale import compute_bounds, compute_scale
from anygraph.render.surface import MatplotlibSurface
from anygraph.validation import GraphConfigValidator


class GraphRenderer:
    """Renders a dataset to image bytes; nothing is cached between calls"""

    def __init__(self, logger: Optional[Logger] = None, dpi: int = 100):
        self.logger = logger or create_default_logger("anygraph.renderer")
        self.painter = CanvasPainter(logger=self.logger)
        self.validator = GraphConfigValidator()
        self.dpi = dpi

    def render(
        self,
        dataset: Union[ValuesDataset, PointsDataset],
        config: GraphConfig,
        format: str = "png",
        return_base64: bool = False,
    ) -> Union[str, bytes]:
        """
        Render a dataset at the config's canvas size

        Args:
            dataset: Values or points to plot
            config: Graph configuration for this pass
            format: Image format (png, jpg, svg, pdf)
            return_base64: Return a base64 string instead of raw bytes

        Returns:
            Image bytes, or base64-encoded string

        Raises:
            ConfigurationError: If the config fails validation
            ValueError: If the format is not supported
            RenderError: If the image cannot be exported
        """
        result = self.validator.validate(config)
        if not result.is_valid:
            self.logger.error("Invalid graph config", errors=len(result.errors))
            raise ConfigurationError(result.get_error_summary())

        width, height = config.render.width, config.render.height
        self.logger.info(
            "Starting render",
            chart_type=config.type,
            format=format,
            width=width,
            height=height,
        )

        bounds = compute_bounds(dataset, config)
        scale = compute_scale(bounds, width, height, config)
        self.logger.debug(
            "Scale computed",
            x_min=scale.x_min,
            x_max=scale.x_max,
            y_min=scale.y_min,
            y_max=scale.y_max,
            pixels_per_unit=scale.x_scale,
        )

        surface = MatplotlibSurface(width, height, dpi=self.dpi)
        try:
            self.painter.paint(surface, dataset, scale, config)
            if return_base64:
                encoded = surface.to_base64(format)
                self.logger.info("Render completed", format=format, base64_length=len(encoded))
                return encoded
            image = surface.to_bytes(format)
            self.logger.info("Render completed", format=format, output_size_bytes=len(image))
            return image
        finally:
            surface.close()
