"""Host-owned graph session

Holds the last dataset and config for a host view (an editor panel, a
notebook cell) and re-renders on demand. Core functions stay stateless; all
state lives on the session instance the host creates and destroys.
"""

from typing import Any, Optional, Union

from anygraph.config import create_default_logger, get_default_graph_config
from anygraph.exceptions import ConfigurationError, SessionClosedError
from anygraph.graph_config import GraphConfig
from anygraph.logger import Logger
from anygraph.models import ParseResult, PointsDataset, ValuesDataset
from anygraph.parsing import DataParser, describe_dataset, to_text
from anygraph.render import GraphRenderer
from anygraph.themes import get_theme
from anygraph.validation import GraphConfigValidator

DatasetType = Union[ValuesDataset, PointsDataset]


class GraphSession:
    """
    Last dataset and config of one host view

    Example:
        session = GraphSession()
        result = session.load_text("[1, 2, 3] [4, 5, 6]")
        png = session.render()
        session.resize(1024, 768)
        session.destroy()
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        dataset: Optional[DatasetType] = None,
        parser: Optional[DataParser] = None,
        logger: Optional[Logger] = None,
    ):
        self.logger = logger or create_default_logger("anygraph.session")
        self._config: Optional[GraphConfig] = (
            config if config is not None else get_default_graph_config()
        )
        self._dataset: Optional[DatasetType] = (
            dataset if dataset is not None else ValuesDataset(values=[])
        )
        self._raw_text = ""
        self._parser = parser or DataParser(logger=self.logger)
        self._renderer = GraphRenderer(logger=self.logger)
        self._closed = False
        self.logger.debug("GraphSession created", session=self.logger.get_session_id())

    def _check_open(self) -> None:
        if self._closed:
            raise SessionClosedError("GraphSession has been destroyed")

    @property
    def config(self) -> GraphConfig:
        self._check_open()
        return self._config

    @property
    def dataset(self) -> DatasetType:
        self._check_open()
        return self._dataset

    @property
    def raw_text(self) -> str:
        self._check_open()
        return self._raw_text

    def load_text(self, raw_text: str) -> ParseResult:
        """
        Parse text and make the result the current dataset

        A failed parse leaves the previous dataset in place, so a half-typed
        edit does not blank the chart.
        """
        self._check_open()
        result = self._parser.parse(raw_text)
        self._raw_text = raw_text
        if result.success:
            self._dataset = result.dataset
            self.logger.info("Dataset loaded", summary=describe_dataset(result.dataset))
        else:
            self.logger.warning("Keeping previous dataset", error=result.error)
        return result

    def update(self, dataset: DatasetType) -> None:
        self._check_open()
        self._dataset = dataset

    def update_config(self, **changes: Any) -> GraphConfig:
        """Replace the config with ``config.updated(**changes)`` and return it"""
        self._check_open()
        self._config = self._config.updated(**changes)
        return self._config

    def apply_theme(self, name: str) -> GraphConfig:
        """
        Restyle the current config with a registered theme

        Raises:
            ConfigurationError: If no theme has that name
        """
        self._check_open()
        result = GraphConfigValidator().validate_theme_name(name)
        if not result.is_valid:
            raise ConfigurationError(result.get_error_summary())
        self._config = get_theme(name).apply(self._config)
        return self._config

    def resize(self, width: int, height: int) -> GraphConfig:
        self._check_open()
        return self.update_config(render={"width": width, "height": height})

    def render(self, format: str = "png") -> bytes:
        self._check_open()
        return self._renderer.render(self._dataset, self._config, format=format)

    def render_base64(self, format: str = "png") -> str:
        self._check_open()
        return self._renderer.render(self._dataset, self._config, format=format, return_base64=True)

    def to_text(self) -> str:
        """Current dataset as editable text"""
        self._check_open()
        return to_text(self._dataset)

    def describe(self) -> str:
        self._check_open()
        return describe_dataset(self._dataset)

    def destroy(self) -> None:
        if self._closed:
            return
        self._config = None
        self._dataset = None
        self._raw_text = ""
        self._closed = True
        self.logger.debug("GraphSession destroyed", session=self.logger.get_session_id())
