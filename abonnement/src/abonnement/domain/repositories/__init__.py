"""Domain repository interfaces."""

from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)

__all__ = [
    "ISubscriptionRepository",
]
