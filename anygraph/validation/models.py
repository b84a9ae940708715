from typing import Any, Dict, List

from pydantic import BaseModel


class ValidationError(BaseModel):
    """One config problem with what was expected and how to fix it"""

    field: str
    message: str
    received_value: Any = None
    expected: str
    suggestions: List[str] = []


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[ValidationError] = []

    @property
    def fields(self) -> List[str]:
        return [err.field for err in self.errors]

    def get_error_summary(self) -> str:
        """Human-readable listing of every error, numbered"""
        if not self.errors:
            return "No errors"

        lines = ["Invalid graph config:"]
        for i, error in enumerate(self.errors, 1):
            lines.append(f"{i}. {error.field}: {error.message}")
            lines.append(f"   Received: {error.received_value}")
            lines.append(f"   Expected: {error.expected}")
            for suggestion in error.suggestions:
                lines.append(f"   - {suggestion}")

        return "\n".join(lines)

    def get_json_errors(self) -> List[Dict[str, Any]]:
        return [
            {
                "field": err.field,
                "message": err.message,
                "received": err.received_value,
                "expected": err.expected,
                "suggestions": err.suggestions,
            }
            for err in self.errors
        ]
