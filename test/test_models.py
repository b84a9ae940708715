"""Tests for dataset, parse result and config models"""

import pytest
from pydantic import TypeAdapter, ValidationError

from anygraph.graph_config import DEFAULT_SERIES_COLOR, GraphConfig, SeriesStyle
from anygraph.models import Dataset, ParseResult, Point, PointsDataset, ValuesDataset


def test_datasets_are_frozen():
    dataset = ValuesDataset(values=[[1, 2]])

    with pytest.raises(ValidationError):
        dataset.values = [[3]]


def test_dataset_discriminator():
    adapter = TypeAdapter(Dataset)

    values = adapter.validate_python({"data_type": "values", "values": [[1, 2]]})
    points = adapter.validate_python({"data_type": "points", "points": [[{"x": 1, "y": 2}]]})

    assert isinstance(values, ValuesDataset)
    assert isinstance(points, PointsDataset)
    assert points.points[0][0] == Point(x=1, y=2)


def test_parse_result_json_round_trip():
    result = ParseResult.ok(PointsDataset(points=[[Point(x=1, y=2)]]), "1,2")

    restored = ParseResult.model_validate_json(result.model_dump_json())

    assert restored == result
    assert isinstance(restored.dataset, PointsDataset)


def test_successful_result_needs_dataset():
    with pytest.raises(ValidationError):
        ParseResult(success=True, raw_data="x")


def test_failed_result_needs_error():
    with pytest.raises(ValidationError):
        ParseResult(success=False, error="", raw_data="x")

    with pytest.raises(ValidationError):
        ParseResult(success=False, error="bad", dataset=ValuesDataset(values=[[1]]))


def test_chart_type_is_checked():
    with pytest.raises(ValidationError):
        GraphConfig(type="pie")


def test_series_style_fallback():
    config = GraphConfig(series=[SeriesStyle(color="red")])

    assert config.series_style(0).color == "red"
    assert config.series_style(5).color == DEFAULT_SERIES_COLOR
    assert config.series_style(5).visible


def test_quadrant_flags():
    assert not GraphConfig(type="line").is_quadrant
    assert GraphConfig(type="quadrant").is_quadrant
    assert not GraphConfig(type="quadrant").is_inverted
    assert GraphConfig(type="quadrant-inverted").is_inverted


def test_updated_merges_nested_settings():
    config = GraphConfig()

    updated = config.updated(type="scatter", scale={"auto_scale": False, "x_max": 4})

    assert updated.type == "scatter"
    assert updated.scale.auto_scale is False
    assert updated.scale.x_max == 4
    assert updated.scale.y_max == 10
    assert config.type == "line"


def test_updated_replaces_series():
    updated = GraphConfig().updated(series=[SeriesStyle(color="green"), {"color": "blue"}])

    assert [s.color for s in updated.series] == ["green", "blue"]


def test_updated_validates():
    with pytest.raises(ValidationError):
        GraphConfig().updated(type="bar")
