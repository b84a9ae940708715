import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DefaultLogger(Logger):
    """Stream logger that writes one formatted line per record.

    Useful when the caller wants log output captured in a buffer of its own
    (an editor output panel, a test's ``io.StringIO``) rather than routed
    through the ``logging`` module.
    """

    def __init__(
        self,
        output: TextIO = sys.stderr,
        include_timestamp: bool = True,
        min_level: str = "DEBUG",
    ):
        """
        Args:
            output: Output stream (default: stderr)
            include_timestamp: Whether to prefix lines with a UTC timestamp
            min_level: Records below this level are dropped
        """
        self._session_id = uuid.uuid4().hex
        self._output = output
        self._include_timestamp = include_timestamp
        self._min_index = _LEVELS.index(min_level.upper()) if min_level.upper() in _LEVELS else 0

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"))

        parts.append(f"[{level}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS.index(level) < self._min_index:
            return
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
