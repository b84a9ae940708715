"""
Validation module for AnyGraph

Checks graph configs before a render pass and reports problems with
suggestions for fixing them.
"""

from .models import ValidationError, ValidationResult
from .validator import GraphConfigValidator

__all__ = [
    "ValidationError",
    "ValidationResult",
    "GraphConfigValidator",
]
