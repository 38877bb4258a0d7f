"""
Validation value objects - Accumulated field errors for one validation pass.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Error:
    """Immutable validation error with numeric code and message."""

    code: int
    message: str

    @classmethod
    def of(cls, code: int, message: str) -> "Error":
        """Create error from named fields."""
        return cls(code=code, message=message)


class ValidationResult:
    """
    Ordered collection of validation errors.

    Errors keep insertion order and duplicates are allowed.
    One instance is created per validation call.
    """

    def __init__(self):
        self._errors: List[Error] = []

    def add(self, error: Error) -> None:
        """Append error to the end of the result."""
        self._errors.append(error)

    @property
    def errors(self) -> tuple[Error, ...]:
        """All errors in insertion order."""
        return tuple(self._errors)

    def has_errors(self) -> bool:
        """Check if at least one error was added."""
        return len(self._errors) > 0

    def __len__(self) -> int:
        return len(self._errors)
