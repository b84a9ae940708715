"""Tests for bounds, power-of-two normalization and the unified scale"""

import math

import pytest

from anygraph.graph_config import GraphConfig, ScaleConfig
from anygraph.models import Bounds, Point, PointsDataset, ValuesDataset
from anygraph.render import MARGIN, compute_bounds, compute_scale, format_scale_label, next_pow2

LINE = GraphConfig(type="line")
SCATTER = GraphConfig(type="scatter")
QUADRANT = GraphConfig(type="quadrant")
QUADRANT_INVERTED = GraphConfig(type="quadrant-inverted")


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (1, 1), (2, 2), (3, 4), (0.3, 0.5), (-5, 8), (1000, 1024), (0.0625, 0.0625)],
)
def test_next_pow2(value, expected):
    assert next_pow2(value) == expected


def test_next_pow2_non_finite():
    assert next_pow2(math.inf) == 1
    assert next_pow2(math.nan) == 1


@pytest.mark.parametrize("value", [1e-9, 0.001, 0.7, 1, 3, 17.5, 1e6, 1e300])
def test_next_pow2_is_idempotent(value):
    once = next_pow2(value)

    assert next_pow2(once) == once


def test_bounds_of_values_use_index_as_x():
    bounds = compute_bounds(ValuesDataset(values=[[1, 2, 3]]), LINE)

    assert bounds.x_min == pytest.approx(-0.2)
    assert bounds.x_max == pytest.approx(2.2)
    assert bounds.y_min == pytest.approx(0.8)
    assert bounds.y_max == pytest.approx(3.2)


def test_bounds_span_all_series():
    dataset = PointsDataset(
        points=[[Point(x=0, y=0), Point(x=10, y=5)], [Point(x=-10, y=-5)]]
    )
    bounds = compute_bounds(dataset, SCATTER)

    assert bounds.x_min == pytest.approx(-12)
    assert bounds.x_max == pytest.approx(12)
    assert bounds.y_min == pytest.approx(-6)
    assert bounds.y_max == pytest.approx(6)


def test_bounds_of_single_point_have_zero_range():
    bounds = compute_bounds(PointsDataset(points=[[Point(x=2, y=3)]]), SCATTER)

    assert bounds == Bounds(x_min=2, x_max=2, y_min=3, y_max=3)


def test_manual_bounds_are_returned_verbatim():
    config = GraphConfig(scale=ScaleConfig(x_min=5, x_max=5, y_min=-1, y_max=1, auto_scale=False))

    bounds = compute_bounds(ValuesDataset(values=[[100, 200]]), config)

    assert bounds == Bounds(x_min=5, x_max=5, y_min=-1, y_max=1)


def test_empty_dataset_falls_back_to_manual_bounds():
    bounds = compute_bounds(ValuesDataset(values=[[]]), LINE)

    assert bounds == Bounds(x_min=0, x_max=10, y_min=0, y_max=10)


def test_line_scale_centers_on_data():
    scale = compute_scale(Bounds(x_min=0, x_max=10, y_min=0, y_max=4), 800, 600, LINE)

    assert (scale.x_min, scale.x_max) == (-3, 13)
    assert (scale.y_min, scale.y_max) == (-6, 10)
    assert scale.plot_size == 520
    assert scale.x_scale == 32.5
    assert scale.offset_x == 140
    assert scale.offset_y == MARGIN


def test_square_plot_on_tall_canvas():
    scale = compute_scale(Bounds(x_min=0, x_max=1, y_min=0, y_max=1), 400, 1000, LINE)

    assert scale.plot_size == 320
    assert scale.offset_x == MARGIN
    assert scale.offset_y == MARGIN + (920 - 320) / 2


@pytest.mark.parametrize("config", [QUADRANT, QUADRANT_INVERTED])
def test_quadrant_scale_centers_origin(config):
    scale = compute_scale(Bounds(x_min=1, x_max=3, y_min=-1, y_max=5), 800, 600, config)

    assert (scale.x_min, scale.x_max) == (-8, 8)
    assert (scale.y_min, scale.y_max) == (-8, 8)
    assert (scale.x_min + scale.x_max) / 2 == 0
    assert (scale.y_min + scale.y_max) / 2 == 0


@pytest.mark.parametrize(
    "bounds",
    [
        Bounds(x_min=0, x_max=1, y_min=0, y_max=1),
        Bounds(x_min=100, x_max=250, y_min=-3, y_max=-2),
        Bounds(x_min=-0.001, x_max=0.002, y_min=7, y_max=7),
        Bounds(x_min=4, x_max=4, y_min=4, y_max=4),
    ],
)
@pytest.mark.parametrize("config", [LINE, SCATTER, QUADRANT, QUADRANT_INVERTED])
@pytest.mark.parametrize("size", [(800, 600), (300, 900), (81, 81)])
def test_scale_is_unified(bounds, config, size):
    scale = compute_scale(bounds, size[0], size[1], config)

    assert scale.x_scale == scale.y_scale
    assert math.isfinite(scale.x_scale) and scale.x_scale > 0
    if config.is_quadrant:
        assert (scale.x_min + scale.x_max) / 2 == 0
        assert (scale.y_min + scale.y_max) / 2 == 0


def test_zero_range_scale_is_finite():
    scale = compute_scale(Bounds(x_min=2, x_max=2, y_min=3, y_max=3), 800, 600, LINE)

    assert (scale.x_min, scale.x_max) == (1.5, 2.5)
    assert (scale.y_min, scale.y_max) == (2.5, 3.5)
    assert scale.x_scale == 520


def test_canvas_smaller_than_margins():
    scale = compute_scale(Bounds(x_min=0, x_max=1, y_min=0, y_max=1), 50, 50, LINE)

    assert scale.plot_size == 1
    assert scale.offset_x == MARGIN
    assert scale.x_scale > 0


def test_pixel_mapping_flips_for_inverted():
    scale = compute_scale(Bounds(x_min=-4, x_max=4, y_min=-4, y_max=4), 800, 600, QUADRANT)

    assert scale.to_pixel_y(scale.y_min) == scale.offset_y + scale.plot_size
    assert scale.to_pixel_y(scale.y_min, inverted=True) == scale.offset_y
    assert scale.to_pixel_x(scale.x_min) == scale.offset_x
    assert scale.to_pixel_x(0) == scale.offset_x + scale.plot_size / 2


@pytest.mark.parametrize(
    "span, expected",
    [
        (8, "8"),
        (1, "1"),
        (0.5, "0.5"),
        (0.125, "0.125"),
        (16, "2^4"),
        (1024, "2^10"),
        (0.0625, "2^-4"),
        (3, "3"),
        (1234.5, "1.23e+03"),
    ],
)
def test_format_scale_label(span, expected):
    assert format_scale_label(span) == expected


def test_scale_far_from_origin():
    dataset = PointsDataset(points=[[Point(x=1e17, y=5), Point(x=1e17, y=6)]])
    bounds = compute_bounds(dataset, SCATTER)

    scale = compute_scale(bounds, 800, 600, SCATTER)

    # x_max - x_min rounds to zero at 1e17; the pixel factor must not
    assert scale.span == 2
    assert scale.x_scale == scale.y_scale == 260
    assert math.isfinite(scale.to_pixel_x(1e17))
    assert scale.to_pixel_y(5.5) == pytest.approx(scale.offset_y + scale.plot_size / 2)


@pytest.mark.parametrize("config", [LINE, QUADRANT])
def test_infinite_manual_bounds(config):
    config = config.updated(
        scale={"x_min": -math.inf, "x_max": math.inf, "y_min": 0, "y_max": 1, "auto_scale": False}
    )
    bounds = compute_bounds(ValuesDataset(values=[[1, 2]]), config)

    scale = compute_scale(bounds, 800, 600, config)

    assert scale.x_scale == scale.y_scale
    assert math.isfinite(scale.x_scale) and scale.x_scale > 0
    for value in (scale.x_min, scale.x_max, scale.y_min, scale.y_max):
        assert math.isfinite(value)
