"""Application validators."""

from abonnement.application.validators.create_subscription_validator import (
    INVALID_EXPIRATION_DATE,
    INVALID_NAME,
    INVALID_PROVIDER,
    INVALID_USER_ID,
    CreateSubscriptionValidator,
)

__all__ = [
    "CreateSubscriptionValidator",
    "INVALID_USER_ID",
    "INVALID_NAME",
    "INVALID_PROVIDER",
    "INVALID_EXPIRATION_DATE",
]
