from typing import List

from matplotlib.colors import is_color_like

from anygraph.graph_config import CHART_TYPES, GraphConfig
from anygraph.themes import list_themes
from anygraph.validation.models import ValidationError, ValidationResult


class GraphConfigValidator:
    """Validates GraphConfig with helpful error messages and suggestions"""

    def __init__(self):
        self.valid_types = CHART_TYPES
        self.valid_themes = list_themes()

    def validate(self, config: GraphConfig) -> ValidationResult:
        """
        Validate a graph config

        Pydantic already guarantees field types and the chart type literal;
        this checks the semantics a render pass relies on.

        Args:
            config: GraphConfig instance to validate

        Returns:
            ValidationResult with errors and suggestions
        """
        errors: List[ValidationError] = []
        errors.extend(self._validate_canvas(config))
        errors.extend(self._validate_colors(config))
        errors.extend(self._validate_manual_bounds(config))
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def validate_theme_name(self, name: str) -> ValidationResult:
        errors = []
        if name.lower() not in self.valid_themes:
            errors.append(
                ValidationError(
                    field="theme",
                    message=f"Invalid theme '{name}'",
                    received_value=name,
                    expected=f"One of: {', '.join(self.valid_themes)}",
                    suggestions=[
                        "Use 'light' for bright backgrounds",
                        "Use 'dark' for dark mode",
                        f"Did you mean '{self._find_closest_match(name, self.valid_themes)}'?",
                    ],
                )
            )
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def _validate_canvas(self, config: GraphConfig) -> List[ValidationError]:
        errors = []
        for field in ("width", "height"):
            value = getattr(config.render, field)
            if value <= 0:
                errors.append(
                    ValidationError(
                        field=f"render.{field}",
                        message=f"Canvas {field} must be positive",
                        received_value=value,
                        expected="Positive number of pixels (typically 200 to 2000)",
                        suggestions=[
                            "Use 800x600 for a default canvas",
                            "Sizes below 80 pixels leave no room inside the axis margin",
                        ],
                    )
                )
        return errors

    def _validate_colors(self, config: GraphConfig) -> List[ValidationError]:
        colors = [
            ("render.background_color", config.render.background_color),
            ("render.grid_color", config.render.grid_color),
            ("render.axis_color", config.render.axis_color),
        ]
        colors.extend((f"series[{i}].color", s.color) for i, s in enumerate(config.series))

        errors = []
        for field, color in colors:
            if not is_color_like(color):
                errors.append(
                    ValidationError(
                        field=field,
                        message=f"Invalid color '{color}'",
                        received_value=color,
                        expected="Hex (#RGB, #RRGGBB, #RRGGBBAA) or a named color",
                        suggestions=[
                            "Use hex format: '#2196f3' or '#29f'",
                            "Use named colors: 'red', 'blue', 'green', etc.",
                        ],
                    )
                )
        return errors

    def _validate_manual_bounds(self, config: GraphConfig) -> List[ValidationError]:
        scale = config.scale
        if scale.auto_scale:
            return []

        errors = []
        for axis, low, high in (("x", scale.x_min, scale.x_max), ("y", scale.y_min, scale.y_max)):
            if high < low:
                errors.append(
                    ValidationError(
                        field=f"scale.{axis}_min, scale.{axis}_max",
                        message=f"{axis}_max must not be below {axis}_min",
                        received_value={f"{axis}_min": low, f"{axis}_max": high},
                        expected=f"{axis}_max >= {axis}_min",
                        suggestions=[
                            f"Swap {axis}_min and {axis}_max",
                            "Enable auto_scale to derive bounds from the data",
                        ],
                    )
                )
        return errors

    def _find_closest_match(self, value: str, options: List[str]) -> str:
        """Find the closest matching option using simple string similarity"""
        if not options:
            return ""

        value_lower = value.lower()

        for option in options:
            if value_lower in option.lower() or option.lower() in value_lower:
                return option

        for option in options:
            if value_lower and option.lower().startswith(value_lower[0]):
                return option

        return options[0]
