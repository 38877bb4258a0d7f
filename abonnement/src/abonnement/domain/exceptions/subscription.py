"""
Subscription domain exceptions.
"""

from abonnement.domain.exceptions.base import AbonnementException


class SubscriptionError(AbonnementException):
    """Base exception for subscription-related errors."""


class InvalidSubscriptionStatusError(SubscriptionError):
    """Raised when a lifecycle transition is not allowed from current status."""

    def __init__(self, action: str, status: str, subscription_id: object = None):
        self.action = action
        self.status = status
        self.subscription_id = subscription_id
        message = (
            f"Cannot {action} subscription {subscription_id}: "
            f"only active subscriptions allow this (status: {status})"
        )
        super().__init__(message, code="INVALID_SUBSCRIPTION_STATUS")


class ProviderNotFoundError(AbonnementException, LookupError):
    """Raised when a provider name matches no supported provider."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown provider: {name}", code="PROVIDER_NOT_FOUND")
