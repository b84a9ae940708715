import logging as python_logging
import uuid
from typing import Any, Union

from .interface import Logger


class ConsoleLogger(Logger):
    """
    Logger backed by Python's ``logging`` module.

    Records go to a stream handler on the named logger and carry a short
    session id so output from one parser or session can be told apart.
    """

    DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s"

    def __init__(
        self,
        name: str = "anygraph",
        level: Union[int, str] = python_logging.INFO,
        format_string: str = DEFAULT_FORMAT,
    ):
        """
        Args:
            name: Logger name
            level: Logging level, numeric or a name such as "DEBUG"
            format_string: Log format string (must include %(session_id)s)
        """
        if isinstance(level, str):
            level = python_logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = python_logging.INFO

        self._session_id = uuid.uuid4().hex[:8]
        self._logger = python_logging.getLogger(name)
        self._logger.setLevel(level)

        # One handler per named logger, however many instances share the name
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def get_session_id(self) -> str:
        return self._session_id

    def _emit(self, level: int, message: str, **kwargs: Any) -> None:
        if kwargs:
            message = message + " " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.log(level, message, extra={"session_id": self._session_id})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit(python_logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit(python_logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit(python_logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit(python_logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._emit(python_logging.CRITICAL, message, **kwargs)
