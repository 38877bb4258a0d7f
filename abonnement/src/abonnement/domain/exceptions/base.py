"""
Base domain exceptions.
"""

from typing import Iterable


class AbonnementException(Exception):
    """Base exception for all Abonnement domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(AbonnementException, ValueError):
    """Raised when a caller references an entity that does not exist."""

    def __init__(self, entity_type: str, entity_id: object):
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class ValidationError(AbonnementException):
    """
    Raised when an inbound request fails field validation.

    Carries every accumulated error so callers can report all of them.
    """

    def __init__(self, errors: Iterable):
        self.errors = tuple(errors)
        details = "; ".join(f"{e.code}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed: {details}", code="VALIDATION_ERROR")
