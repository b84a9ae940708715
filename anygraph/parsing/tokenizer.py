"""Number tokenizer

Turns a text fragment into a flat list of floats. Tokens are split on runs
of commas and whitespace; each token contributes its leading number, so
``"12px"`` reads as 12 and ``"abc"`` is dropped.
"""

import math
import re
from typing import List, Optional

_SEPARATORS = re.compile(r"[,\s]+")
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(token: str) -> Optional[float]:
    """Read the number a token starts with, or None if it starts with none"""
    match = _LEADING_NUMBER.match(token.strip())
    if not match:
        return None
    value = float(match.group(0))
    # Exponents beyond the float range overflow to inf
    if not math.isfinite(value):
        return None
    return value


def tokenize_numbers(text: str) -> List[float]:
    numbers = []
    for part in _SEPARATORS.split(text):
        if not part:
            continue
        value = parse_number(part)
        if value is not None:
            numbers.append(value)
    return numbers
