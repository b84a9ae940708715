"""
Logger module for AnyGraph

Components take any ``Logger`` implementation and fall back to a
``ConsoleLogger`` when none is given.

Usage:
    from anygraph.logger import ConsoleLogger, DefaultLogger

    logger = ConsoleLogger(name="anygraph.parser")
    logger.info("Parsed input", series=2)

    # Capture output in a buffer instead
    buffer = io.StringIO()
    parser = DataParser(logger=DefaultLogger(output=buffer))
"""

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
]
