from abc import ABC, abstractmethod
from typing import Any, Dict

from anygraph.graph_config import GraphConfig, SeriesStyle


class Theme(ABC):
    """Abstract base class for graph color themes"""

    name: str = ""
    background_color: str = ""
    grid_color: str = ""
    axis_color: str = ""

    @abstractmethod
    def get_colors(self) -> list[str]:
        """Get the series palette, in series order"""

    def get_default_color(self) -> str:
        return self.get_colors()[0]

    def apply(self, config: GraphConfig) -> GraphConfig:
        """
        Return a copy of ``config`` styled with this theme

        Canvas colors are replaced and every palette color gets a series
        style. Labels and visibility of existing styles are kept.
        """
        series = []
        for index, color in enumerate(self.get_colors()):
            current = config.series[index] if index < len(config.series) else None
            series.append(
                SeriesStyle(
                    color=color,
                    label=current.label if current else f"Series {index + 1}",
                    visible=current.visible if current else True,
                )
            )
        return config.updated(
            render={
                "background_color": self.background_color,
                "grid_color": self.grid_color,
                "axis_color": self.axis_color,
            },
            series=series,
        )

    def get_config(self) -> Dict[str, Any]:
        """Get theme configuration as a dictionary"""
        return {
            "name": self.name,
            "background_color": self.background_color,
            "grid_color": self.grid_color,
            "axis_color": self.axis_color,
            "colors": self.get_colors(),
        }
