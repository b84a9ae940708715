"""JSON interpretation of the whole input

Accepts strict JSON and "relaxed" JSON with bare object keys
(``{x: [1, 2], y: [3, 4]}``). Two shapes produce a point series:

- an array of objects with numeric ``x`` and ``y`` fields
- an object whose ``x`` and ``y`` fields are both arrays

Anything else yields nothing so the text-based stages can try.
"""

import json
import math
import re
from typing import Any, List, Optional

from anygraph.exceptions import MalformedJsonError
from anygraph.models import Point, PointsDataset

_BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_$][\w$]*)(\s*:)")


def looks_like_json(text: str) -> bool:
    """True when the text is wrapped in a matching [] or {} pair"""
    return len(text) >= 2 and (
        (text[0] == "[" and text[-1] == "]") or (text[0] == "{" and text[-1] == "}")
    )


def relax_json_keys(text: str) -> str:
    """Quote bare object keys that follow ``{`` or ``,``"""
    return _BARE_KEY.sub(r'\1"\2"\3', text)


def load_json(text: str) -> Any:
    """
    Parse text as strict JSON, retrying with bare keys quoted

    Raises:
        MalformedJsonError: If both attempts fail
    """
    try:
        return json.loads(text)
    except ValueError:
        pass

    try:
        return json.loads(relax_json_keys(text))
    except ValueError as e:
        raise MalformedJsonError(f"Input is neither strict nor relaxed JSON: {e}")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large for a float
        return False


def _points_from_objects(items: List[Any]) -> List[Point]:
    return [
        Point(x=item["x"], y=item["y"])
        for item in items
        if isinstance(item, dict) and _is_number(item.get("x")) and _is_number(item.get("y"))
    ]


def _points_from_columns(xs: List[Any], ys: List[Any]) -> List[Point]:
    xs = [v for v in xs if _is_number(v)]
    ys = [v for v in ys if _is_number(v)]
    return [Point(x=x, y=y) for x, y in zip(xs, ys)]


def interpret_json(value: Any) -> Optional[PointsDataset]:
    """Build a single-series points dataset from a parsed JSON value"""
    points: List[Point] = []
    if isinstance(value, list) and any(isinstance(item, dict) for item in value):
        points = _points_from_objects(value)
    elif (
        isinstance(value, dict)
        and isinstance(value.get("x"), list)
        and isinstance(value.get("y"), list)
    ):
        points = _points_from_columns(value["x"], value["y"])

    if not points:
        return None
    return PointsDataset(points=[points])


def parse_json_dataset(text: str) -> Optional[PointsDataset]:
    """
    Try to read the trimmed input as a JSON point dataset

    Returns:
        PointsDataset with one series, or None when the text is not
        JSON-shaped or has no recognizable coordinate layout

    Raises:
        MalformedJsonError: If the text is JSON-shaped but unparseable
    """
    if not looks_like_json(text):
        return None
    return interpret_json(load_json(text))
