"""Bounds and unified-scale computation

The plot area is always a square inside a fixed margin, and one
pixels-per-unit factor applies to both axes. Ranges are normalized to powers
of two so grid steps and axis labels come out as round numbers.
"""

import math
from typing import Union

from anygraph.graph_config import GraphConfig
from anygraph.models import Bounds, PointsDataset, Scale, ValuesDataset

MARGIN = 40.0
PADDING_RATIO = 0.1

# Largest power of two below the float maximum
_MAX_EXPONENT = 1023


def next_pow2(value: float) -> float:
    """
    Smallest power of two not below ``|value|``

    Zero and non-finite values map to 1 so a degenerate range still gives a
    usable scale.
    """
    magnitude = abs(value)
    if magnitude == 0 or not math.isfinite(magnitude):
        return 1.0
    exponent = min(math.ceil(math.log2(magnitude)), _MAX_EXPONENT)
    return math.ldexp(1.0, exponent)


def compute_bounds(dataset: Union[ValuesDataset, PointsDataset], config: GraphConfig) -> Bounds:
    """
    Data extent of a dataset, padded by 10% of each axis range

    Values series use the sample index as x. Manual bounds from the config
    are returned as-is when autoscale is off or the dataset holds no data.
    """
    manual = Bounds(
        x_min=config.scale.x_min,
        x_max=config.scale.x_max,
        y_min=config.scale.y_min,
        y_max=config.scale.y_max,
    )
    if not config.scale.auto_scale:
        return manual

    if dataset.data_type == "values":
        coords = [
            (float(index), value)
            for series in dataset.values
            for index, value in enumerate(series)
        ]
    else:
        coords = [(point.x, point.y) for series in dataset.points for point in series]

    if not coords:
        return manual

    xs = [x for x, _ in coords]
    ys = [y for _, y in coords]
    x_min, x_max = min(xs), max(xs)
    y_min, y_max = min(ys), max(ys)

    x_padding = (x_max - x_min) * PADDING_RATIO
    y_padding = (y_max - y_min) * PADDING_RATIO

    return Bounds(
        x_min=x_min - x_padding,
        x_max=x_max + x_padding,
        y_min=y_min - y_padding,
        y_max=y_max + y_padding,
    )


def normalized_span(bounds: Bounds, config: GraphConfig) -> float:
    """
    Power-of-two side length of the square data range

    Quadrant charts need room for the furthest bound on both sides of the
    origin; other charts only need the larger of the two ranges.
    """
    if config.is_quadrant:
        furthest = max(abs(bounds.x_min), abs(bounds.x_max), abs(bounds.y_min), abs(bounds.y_max))
        return next_pow2(max(bounds.x_range, bounds.y_range, 2 * furthest))
    return next_pow2(max(bounds.x_range, bounds.y_range))


def _center(low: float, high: float) -> float:
    center = (low + high) / 2
    # Infinite manual bounds have no usable midpoint
    return center if math.isfinite(center) else 0.0


def normalize_bounds(bounds: Bounds, config: GraphConfig) -> Bounds:
    """
    Square, power-of-two sized bounds around the data

    Quadrant charts are centered on the origin with a range large enough to
    keep every bound visible; other charts keep each axis centered on the
    data's own midpoint.
    """
    span = normalized_span(bounds, config)
    if config.is_quadrant:
        return Bounds(x_min=-span / 2, x_max=span / 2, y_min=-span / 2, y_max=span / 2)

    x_center = _center(bounds.x_min, bounds.x_max)
    y_center = _center(bounds.y_min, bounds.y_max)
    return Bounds(
        x_min=x_center - span / 2,
        x_max=x_center + span / 2,
        y_min=y_center - span / 2,
        y_max=y_center + span / 2,
    )


def compute_scale(bounds: Bounds, width: float, height: float, config: GraphConfig) -> Scale:
    """
    Pixel mapping for a canvas of ``width`` x ``height``

    Args:
        bounds: Data bounds, typically from ``compute_bounds``
        width: Canvas width in pixels
        height: Canvas height in pixels
        config: Graph config; the chart type selects quadrant centering

    Returns:
        Scale holding the normalized bounds, a single pixels-per-unit factor
        for both axes and the offset of the square plot area, which is
        centered on the axis with slack
    """
    available_width = width - 2 * MARGIN
    available_height = height - 2 * MARGIN
    # Canvases smaller than the margins still get a one-pixel plot
    plot_size = max(min(available_width, available_height), 1.0)

    normalized = normalize_bounds(bounds, config)
    # x_max - x_min rounds to zero for small spans far from the origin
    unit = plot_size / normalized_span(bounds, config)

    return Scale(
        x_min=normalized.x_min,
        x_max=normalized.x_max,
        y_min=normalized.y_min,
        y_max=normalized.y_max,
        x_scale=unit,
        y_scale=unit,
        offset_x=MARGIN + max(available_width - plot_size, 0.0) / 2,
        offset_y=MARGIN + max(available_height - plot_size, 0.0) / 2,
        plot_size=plot_size,
    )


def format_scale_label(span: float) -> str:
    """
    Axis label text for a normalized scale span

    Powers of two from 0.125 to 8 print as plain numbers, other powers of
    two as ``2^<exponent>``, anything else with three significant digits.
    """
    if span > 0 and math.isfinite(span):
        mantissa, exponent = math.frexp(span)
        if mantissa == 0.5:
            power = exponent - 1
            if -3 <= power <= 3:
                return f"{span:g}"
            return f"2^{power}"
    return f"{span:.3g}"
