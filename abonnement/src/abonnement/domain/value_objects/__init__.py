"""Domain value objects."""

from abonnement.domain.value_objects.validation_result import (
    Error,
    ValidationResult,
)

__all__ = [
    "Error",
    "ValidationResult",
]
