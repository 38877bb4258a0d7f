"""
Domain exceptions package.
"""

# Base exceptions
from abonnement.domain.exceptions.base import (
    AbonnementException,
    EntityNotFoundError,
    ValidationError,
)

# Subscription exceptions
from abonnement.domain.exceptions.subscription import (
    InvalidSubscriptionStatusError,
    ProviderNotFoundError,
    SubscriptionError,
)

__all__ = [
    # Base
    "AbonnementException",
    "EntityNotFoundError",
    "ValidationError",
    # Subscription
    "SubscriptionError",
    "InvalidSubscriptionStatusError",
    "ProviderNotFoundError",
]
