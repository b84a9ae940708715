"""Custom exceptions for AnyGraph.

The parser never lets these escape ``parse()``: parse failures are raised
inside the parsing stages and converted to a failed ``ParseResult`` at the
orchestrator boundary. Configuration and session errors propagate to the
caller.
"""


class AnyGraphError(Exception):
    """Base class for all AnyGraph errors"""


class ParseError(AnyGraphError):
    """Base class for failures while turning raw text into a dataset"""


class EmptyInputError(ParseError):
    """Input had no usable characters"""

    def __init__(self, message: str = "No data found in input text"):
        super().__init__(message)


class NoNumericDataError(ParseError):
    """Characters were present but no numbers could be recovered"""

    def __init__(self, message: str = "No numeric data found"):
        super().__init__(message)


class MalformedJsonError(ParseError):
    """JSON-shaped text that failed both strict and relaxed parsing"""


class ConfigurationError(AnyGraphError):
    """Invalid graph configuration or environment settings"""


class RenderError(AnyGraphError):
    """A drawing surface failed to export its image"""


class SessionClosedError(AnyGraphError):
    """A destroyed GraphSession was used again"""


__all__ = [
    "AnyGraphError",
    "ParseError",
    "EmptyInputError",
    "NoNumericDataError",
    "MalformedJsonError",
    "ConfigurationError",
    "RenderError",
    "SessionClosedError",
]
