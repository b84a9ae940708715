"""Graph configuration

Defines the chart kind, scale, render and per-series style settings consumed
by the scale calculator and the painter. Configs are immutable for a render
pass; ``GraphConfig.updated`` produces the next one.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

ChartType = Literal["line", "scatter", "quadrant", "quadrant-inverted"]

CHART_TYPES: List[str] = ["line", "scatter", "quadrant", "quadrant-inverted"]
QUADRANT_TYPES = ("quadrant", "quadrant-inverted")

DEFAULT_SERIES_COLOR = "#2196f3"


class ScaleConfig(BaseModel):
    """Manual bounds plus the autoscale switch"""

    model_config = ConfigDict(frozen=True)

    x_min: float = 0.0
    x_max: float = 10.0
    y_min: float = 0.0
    y_max: float = 10.0
    auto_scale: bool = True


class RenderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = 800
    height: int = 600
    background_color: str = "#ffffff"
    grid_color: str = "#e0e0e0"
    axis_color: str = "#333333"
    show_grid: bool = True
    show_axes: bool = True


class SeriesStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str = DEFAULT_SERIES_COLOR
    label: Optional[str] = None
    visible: bool = True


class GraphConfig(BaseModel):
    """Everything a render pass needs besides the dataset and canvas"""

    model_config = ConfigDict(frozen=True)

    type: ChartType = "line"
    scale: ScaleConfig = ScaleConfig()
    render: RenderConfig = RenderConfig()
    series: List[SeriesStyle] = [SeriesStyle(label="Series 1")]

    @property
    def is_quadrant(self) -> bool:
        return self.type in QUADRANT_TYPES

    @property
    def is_inverted(self) -> bool:
        return self.type == "quadrant-inverted"

    def series_style(self, index: int) -> SeriesStyle:
        """Style for the series at ``index``, falling back to the default color"""
        if 0 <= index < len(self.series):
            return self.series[index]
        return SeriesStyle()

    def updated(self, **changes: Any) -> "GraphConfig":
        """
        Return a new config with ``changes`` applied

        ``scale`` and ``render`` may be given as partial dicts, which are
        merged into the current nested settings; every other value replaces
        the current one.

        Example:
            config.updated(type="scatter", scale={"auto_scale": False, "x_max": 4})
        """
        data: Dict[str, Any] = self.model_dump()
        for key, value in changes.items():
            if key in ("scale", "render") and isinstance(value, dict):
                data[key] = {**data[key], **value}
            elif isinstance(value, BaseModel):
                data[key] = value.model_dump()
            elif key == "series" and value is not None:
                data[key] = [s.model_dump() if isinstance(s, BaseModel) else s for s in value]
            else:
                data[key] = value
        return GraphConfig.model_validate(data)
