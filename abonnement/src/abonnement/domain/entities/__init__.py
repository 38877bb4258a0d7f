"""Domain entities."""

from abonnement.domain.entities.subscription import (
    Provider,
    Subscription,
    SubscriptionAction,
    SubscriptionStatus,
    next_status,
)

__all__ = [
    "Subscription",
    "Provider",
    "SubscriptionStatus",
    "SubscriptionAction",
    "next_status",
]
