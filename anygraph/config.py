"""Application configuration

Centralized defaults for logging, chart kind, theme, canvas size and the
classification rule. Every value can be overridden through an ANYGRAPH_*
environment variable, and tests can pin values with ``Config.set_overrides``.
"""

import os
from typing import Any, Dict

from anygraph.exceptions import ConfigurationError
from anygraph.graph_config import CHART_TYPES, GraphConfig, RenderConfig
from anygraph.logger import ConsoleLogger

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_CLASSIFICATION_RULES = ["pairs", "even_pairs"]


class Config:
    """Application configuration with support for test overrides"""

    _overrides: Dict[str, str] = {}

    @classmethod
    def _get(cls, key: str, default: str) -> str:
        if key in cls._overrides:
            return cls._overrides[key]
        return os.environ.get(f"ANYGRAPH_{key}", default)

    @classmethod
    def get_log_level(cls) -> str:
        """
        Get the log level for components created without an explicit logger

        Returns:
            Level name (configurable via ANYGRAPH_LOG_LEVEL, default INFO)
        """
        level = cls._get("LOG_LEVEL", "INFO").upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{level}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @classmethod
    def get_chart_type(cls) -> str:
        chart_type = cls._get("CHART_TYPE", "line").lower()
        if chart_type not in CHART_TYPES:
            raise ConfigurationError(
                f"Invalid chart type '{chart_type}'. Expected one of: {', '.join(CHART_TYPES)}"
            )
        return chart_type

    @classmethod
    def get_theme_name(cls) -> str:
        return cls._get("THEME", "light").lower()

    @classmethod
    def get_canvas_size(cls) -> tuple[int, int]:
        """
        Get the default canvas size in pixels

        Returns:
            (width, height) from ANYGRAPH_CANVAS_WIDTH / ANYGRAPH_CANVAS_HEIGHT,
            defaulting to 800x600
        """
        width = cls._get_positive_int("CANVAS_WIDTH", 800)
        height = cls._get_positive_int("CANVAS_HEIGHT", 600)
        return width, height

    @classmethod
    def get_classification_rule(cls) -> str:
        rule = cls._get("CLASSIFICATION", "pairs").lower()
        if rule not in _CLASSIFICATION_RULES:
            raise ConfigurationError(
                f"Invalid classification rule '{rule}'. "
                f"Expected one of: {', '.join(_CLASSIFICATION_RULES)}"
            )
        return rule

    @classmethod
    def _get_positive_int(cls, key: str, default: int) -> int:
        raw = cls._get(key, str(default))
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"ANYGRAPH_{key} must be an integer, got '{raw}'")
        if value <= 0:
            raise ConfigurationError(f"ANYGRAPH_{key} must be positive, got {value}")
        return value

    @classmethod
    def set_overrides(cls, **values: Any) -> None:
        """
        Pin configuration values regardless of the environment

        Args:
            values: Keys without the ANYGRAPH_ prefix, e.g. CHART_TYPE="scatter"
        """
        cls._overrides = {**cls._overrides, **{k.upper(): str(v) for k, v in values.items()}}

    @classmethod
    def clear_overrides(cls) -> None:
        cls._overrides = {}


def get_default_graph_config() -> GraphConfig:
    """Build the starting GraphConfig from configuration and the selected theme"""
    from anygraph.themes import get_theme

    width, height = Config.get_canvas_size()
    config = GraphConfig(
        type=Config.get_chart_type(),
        render=RenderConfig(width=width, height=height),
    )
    try:
        theme = get_theme(Config.get_theme_name())
    except ValueError as e:
        raise ConfigurationError(str(e))
    return theme.apply(config)


def create_default_logger(name: str) -> ConsoleLogger:
    """
    ConsoleLogger at the configured level, for components given no logger

    An invalid ANYGRAPH_LOG_LEVEL is reported through the new logger and
    treated as INFO, so a bad setting cannot stop parsing or painting.
    """
    try:
        return ConsoleLogger(name=name, level=Config.get_log_level())
    except ConfigurationError as e:
        logger = ConsoleLogger(name=name, level="INFO")
        logger.warning("Ignoring invalid log level", error=str(e))
        return logger
