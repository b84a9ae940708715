"""Numeric array extraction from cleaned text

Each extractor returns a list of number arrays, one per series candidate,
in order of appearance. An empty list means the extractor found nothing and
the next one should be tried.
"""

import re
from typing import List

from anygraph.parsing.tokenizer import tokenize_numbers

_ARRAY_LITERAL = re.compile(r"\[([\d+\-.,\seE]+)\]|\(([\d+\-.,\seE]+)\)")


def extract_bracketed_arrays(text: str) -> List[List[float]]:
    """Numbers inside every ``[...]`` or ``(...)`` group of plain numeric text"""
    arrays = []
    for match in _ARRAY_LITERAL.finditer(text):
        body = match.group(1) if match.group(1) is not None else match.group(2)
        numbers = tokenize_numbers(body)
        if numbers:
            arrays.append(numbers)
    return arrays


def split_multiline_series(text: str) -> List[List[float]]:
    """
    Split lines into series using the trailing-comma continuation rule

    A line ending in a comma continues into the next line; any other line
    closes the current series. Blank lines are ignored.

    Example:
        "1,2,3,\\n4,5\\n6" -> [[1, 2, 3, 4, 5], [6]]
    """
    arrays: List[List[float]] = []
    pending: List[float] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        continues = line.endswith(",")
        pending.extend(tokenize_numbers(line[:-1] if continues else line))

        if not continues and pending:
            arrays.append(pending)
            pending = []

    if pending:
        arrays.append(pending)
    return arrays


def extract_flat_sequence(text: str) -> List[List[float]]:
    """Every number in the text as a single series, newlines ignored"""
    numbers = tokenize_numbers(text)
    return [numbers] if numbers else []
