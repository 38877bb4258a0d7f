"""Application DTOs."""

from abonnement.application.dto.subscription_dto import CreateSubscriptionDto

__all__ = [
    "CreateSubscriptionDto",
]
