"""Application mappers."""

from abonnement.application.mappers.create_subscription_mapper import (
    CreateSubscriptionMapper,
)

__all__ = [
    "CreateSubscriptionMapper",
]
