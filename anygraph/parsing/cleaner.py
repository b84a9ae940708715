"""Input cleaning ahead of number extraction

Removes wrapper text around the data (leading prose, ``console.log(...)``
style calls, ``label:`` prefixes) and normalizes horizontal whitespace.
Newlines survive, since the line-continuation rule depends on them.
"""

import re

# Characters that may start or end a data region: brackets, digits, signs,
# dots, commas and whitespace.
_LEADING_NOISE = re.compile(r"^[^\[\]()\d+\-.,\s]+")
_TRAILING_NOISE = re.compile(r"[^\[\]()\d+\-.,\s]+$")
_HORIZONTAL_SPACE = re.compile(r"[ \t]+")
_FUNCTION_CALL = re.compile(r"[A-Za-z_]\w*\s*\(([^)]+)\)")
_LABEL = re.compile(r"[^\[\]()\d+\-.,\s]+:")


def clean_input(text: str) -> str:
    cleaned = _LEADING_NOISE.sub("", text)
    cleaned = _TRAILING_NOISE.sub("", cleaned)
    cleaned = _HORIZONTAL_SPACE.sub(" ", cleaned).strip()

    # hoge([1, 2, 3]) -> [1, 2, 3], but only when the call is unambiguous
    calls = _FUNCTION_CALL.findall(cleaned)
    if len(calls) == 1:
        cleaned = calls[0]

    return _LABEL.sub("", cleaned)
