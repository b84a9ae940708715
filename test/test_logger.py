"""Tests for the logger implementations"""

import io
import logging

from anygraph.logger import ConsoleLogger, DefaultLogger, Logger


def test_default_logger_format():
    buffer = io.StringIO()
    logger = DefaultLogger(output=buffer, include_timestamp=False)

    logger.info("Parsed input", series=2, data_type="values")

    line = buffer.getvalue().strip()
    assert line == f"[INFO] [session:{logger.get_session_id()[:8]}] Parsed input (series=2 data_type=values)"


def test_default_logger_min_level():
    buffer = io.StringIO()
    logger = DefaultLogger(output=buffer, min_level="warning")

    logger.debug("hidden")
    logger.info("hidden")
    logger.warning("shown")
    logger.error("shown too")

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 2
    assert "[WARNING]" in lines[0]
    assert "[ERROR]" in lines[1]


def test_default_logger_timestamp():
    buffer = io.StringIO()

    DefaultLogger(output=buffer).critical("boom")

    assert buffer.getvalue().split(" ")[0].endswith("Z")


def test_console_logger_routes_through_logging(caplog):
    logger = ConsoleLogger(name="anygraph.test.console", level="DEBUG")

    with caplog.at_level(logging.DEBUG, logger="anygraph.test.console"):
        logger.debug("Scale computed", pixels_per_unit=32.5)

    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "Scale computed pixels_per_unit=32.5"
    assert record.session_id == logger.get_session_id()


def test_console_logger_level_names():
    assert ConsoleLogger(name="anygraph.test.level", level="warning")._logger.level == logging.WARNING
    assert ConsoleLogger(name="anygraph.test.bogus", level="bogus")._logger.level == logging.INFO


def test_console_logger_single_handler():
    ConsoleLogger(name="anygraph.test.handlers")
    logger = ConsoleLogger(name="anygraph.test.handlers")

    assert len(logger._logger.handlers) == 1
    assert logger.name == "anygraph.test.handlers"


def test_loggers_share_interface(logger):
    assert isinstance(logger, Logger)
    assert isinstance(DefaultLogger(output=io.StringIO()), Logger)
