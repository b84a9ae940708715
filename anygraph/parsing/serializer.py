"""Dataset to text

``to_text`` writes one bracketed line per series. Feeding the output back
to the parser reproduces the dataset for the common shapes; the parser is
heuristic, so this is not a general inverse (a single points series comes
back as values, for example).
"""

from decimal import Decimal
from typing import Iterable, Union

from anygraph.models import PointsDataset, ValuesDataset


def format_number(value: float) -> str:
    """Plain decimal text for a number: no exponent, no trailing ``.0``"""
    if value == 0:
        return "0"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _bracket(numbers: Iterable[float]) -> str:
    return "[" + ", ".join(format_number(n) for n in numbers) + "]"


def to_text(dataset: Union[ValuesDataset, PointsDataset]) -> str:
    if dataset.data_type == "values":
        return "\n".join(_bracket(series) for series in dataset.values)
    return "\n".join(
        _bracket(coord for point in series for coord in (point.x, point.y))
        for series in dataset.points
    )


def describe_dataset(dataset: Union[ValuesDataset, PointsDataset]) -> str:
    """Short summary such as "2 series, 6 values total" """
    if dataset.data_type == "values":
        total = sum(len(series) for series in dataset.values)
        return f"{len(dataset.values)} series, {total} values total"
    total = sum(len(series) for series in dataset.points)
    return f"{len(dataset.points)} series, {total} points total"
