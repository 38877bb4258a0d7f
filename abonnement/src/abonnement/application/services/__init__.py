"""Application services."""

from abonnement.application.services.subscription_service import (
    SubscriptionService,
)

__all__ = [
    "SubscriptionService",
]
