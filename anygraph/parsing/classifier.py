"""Dataset type classification

Decides whether extracted number arrays are scalar series (``values``) or
(x, y) point series (``points``).
"""

from enum import Enum
from typing import List, Sequence, Union

from anygraph.models import Point, PointsDataset, ValuesDataset

EVEN_PAIRS_MAX_LENGTH = 10


class ClassificationRule(str, Enum):
    """
    PAIRS: several arrays that all hold exactly two numbers are points, one
    single-point series per array; a lone array is always values.

    EVEN_PAIRS: when every array has an even length of at most 10, each
    array is paired up into one point series, a lone array included.
    """

    PAIRS = "pairs"
    EVEN_PAIRS = "even_pairs"


def convert_to_points(numbers: Sequence[float]) -> List[Point]:
    """
    Pair a flat number list into points

    An odd trailing x repeats the previous y; a lone number gets y=0.

    Example:
        [1, 2, 3, 4, 5] -> (1, 2), (3, 4), (5, 4)
    """
    points = []
    for i in range(0, len(numbers), 2):
        x = numbers[i]
        if i + 1 < len(numbers):
            y = numbers[i + 1]
        elif i > 0:
            y = numbers[i - 1]
        else:
            y = 0.0
        points.append(Point(x=x, y=y))
    return points


def classify_arrays(
    arrays: List[List[float]],
    rule: ClassificationRule = ClassificationRule.PAIRS,
) -> Union[ValuesDataset, PointsDataset]:
    if rule == ClassificationRule.EVEN_PAIRS:
        return _classify_even_pairs(arrays)
    return _classify_pairs(arrays)


def _classify_pairs(arrays: List[List[float]]) -> Union[ValuesDataset, PointsDataset]:
    if len(arrays) > 1 and all(len(arr) == 2 for arr in arrays):
        return PointsDataset(points=[convert_to_points(arr) for arr in arrays])
    return ValuesDataset(values=[list(arr) for arr in arrays])


def _classify_even_pairs(arrays: List[List[float]]) -> Union[ValuesDataset, PointsDataset]:
    if arrays and all(
        len(arr) % 2 == 0 and 0 < len(arr) <= EVEN_PAIRS_MAX_LENGTH for arr in arrays
    ):
        return PointsDataset(points=[convert_to_points(arr) for arr in arrays])
    return ValuesDataset(values=[list(arr) for arr in arrays])
