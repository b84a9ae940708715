"""
Parsing module for AnyGraph

Freeform text to dataset, and dataset back to editable text.
"""

from .classifier import ClassificationRule, classify_arrays, convert_to_points
from .cleaner import clean_input
from .extractors import extract_bracketed_arrays, extract_flat_sequence, split_multiline_series
from .json_adapter import parse_json_dataset, relax_json_keys
from .parser import DataParser, parse
from .serializer import describe_dataset, to_text
from .tokenizer import parse_number, tokenize_numbers

__all__ = [
    "ClassificationRule",
    "DataParser",
    "classify_arrays",
    "clean_input",
    "convert_to_points",
    "describe_dataset",
    "extract_bracketed_arrays",
    "extract_flat_sequence",
    "parse",
    "parse_json_dataset",
    "parse_number",
    "relax_json_keys",
    "split_multiline_series",
    "to_text",
    "tokenize_numbers",
]
