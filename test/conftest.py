"""Pytest configuration and fixtures

Provides shared fixtures for all tests: configuration isolation, a test
logger and a recording surface for painter assertions.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

import pytest

from anygraph.config import Config
from helpers.recording_surface import RecordingSurface


@pytest.fixture(scope="function", autouse=True)
def isolated_config(monkeypatch):
    """
    Automatically isolate configuration for each test

    Removes ANYGRAPH_* variables inherited from the shell and clears any
    overrides a previous test pinned.
    """
    for key in [
        "ANYGRAPH_LOG_LEVEL",
        "ANYGRAPH_CHART_TYPE",
        "ANYGRAPH_THEME",
        "ANYGRAPH_CANVAS_WIDTH",
        "ANYGRAPH_CANVAS_HEIGHT",
        "ANYGRAPH_CLASSIFICATION",
    ]:
        monkeypatch.delenv(key, raising=False)
    Config.clear_overrides()

    yield

    Config.clear_overrides()


@pytest.fixture(scope="function")
def logger():
    """
    Provide a ConsoleLogger instance for test logging.

    Returns:
        ConsoleLogger: Logger configured for testing
    """
    from anygraph.logger import ConsoleLogger

    return ConsoleLogger(name="test", level=logging.INFO)


@pytest.fixture(scope="function")
def surface():
    """A RecordingSurface the size of the default 800x600 canvas"""
    return RecordingSurface(800, 600)
