"""Tests for GraphSession"""

import io

import pytest

from anygraph.config import Config
from anygraph.exceptions import ConfigurationError, SessionClosedError
from anygraph.graph_config import GraphConfig
from anygraph.logger import DefaultLogger
from anygraph.models import Point, PointsDataset, ValuesDataset
from anygraph.session import GraphSession


@pytest.fixture
def session():
    session = GraphSession(logger=DefaultLogger(output=io.StringIO()))
    yield session
    session.destroy()


def test_new_session_starts_empty(session):
    assert session.dataset == ValuesDataset(values=[])
    assert session.raw_text == ""
    assert session.config.type == "line"
    assert session.config.render.background_color == "#ffffff"


def test_new_session_uses_configured_defaults():
    Config.set_overrides(CHART_TYPE="quadrant", THEME="dark")

    session = GraphSession(logger=DefaultLogger(output=io.StringIO()))

    assert session.config.type == "quadrant"
    assert session.config.render.background_color == "#1e1e1e"


def test_load_text_replaces_dataset(session):
    result = session.load_text("[1, 2, 3] [4, 5, 6]")

    assert result.success
    assert session.dataset == ValuesDataset(values=[[1, 2, 3], [4, 5, 6]])
    assert session.raw_text == "[1, 2, 3] [4, 5, 6]"
    assert session.describe() == "2 series, 6 values total"


def test_failed_load_keeps_previous_dataset(session):
    session.load_text("1, 2, 3")

    result = session.load_text("still typing...")

    assert not result.success
    assert session.dataset == ValuesDataset(values=[[1, 2, 3]])
    assert session.raw_text == "still typing..."


def test_update_sets_dataset(session):
    dataset = PointsDataset(points=[[Point(x=1, y=2), Point(x=3, y=4)]])

    session.update(dataset)

    assert session.dataset == dataset
    assert session.to_text() == "[1, 2, 3, 4]"
    assert session.describe() == "1 series, 2 points total"


def test_update_config(session):
    config = session.update_config(type="scatter", scale={"auto_scale": False})

    assert config.type == "scatter"
    assert session.config.scale.auto_scale is False


def test_resize(session):
    session.resize(1024, 768)

    assert (session.config.render.width, session.config.render.height) == (1024, 768)


def test_apply_theme(session):
    session.update_config(type="quadrant-inverted")

    config = session.apply_theme("dark")

    assert config.type == "quadrant-inverted"
    assert config.render.background_color == "#1e1e1e"


def test_apply_unknown_theme(session):
    with pytest.raises(ConfigurationError, match="Invalid theme 'neon'"):
        session.apply_theme("neon")


def test_render(session):
    session.load_text("1,2\n3,4\n5,6")

    assert session.render().startswith(b"\x89PNG")
    assert session.render_base64()


def test_render_with_invalid_config():
    session = GraphSession(
        config=GraphConfig().updated(render={"width": -1}),
        logger=DefaultLogger(output=io.StringIO()),
    )

    with pytest.raises(ConfigurationError):
        session.render()


def test_destroyed_session_rejects_use(session):
    session.destroy()

    with pytest.raises(SessionClosedError):
        session.load_text("1, 2")
    with pytest.raises(SessionClosedError):
        session.render()
    with pytest.raises(SessionClosedError):
        _ = session.config


def test_destroy_is_idempotent(session):
    session.destroy()
    session.destroy()
