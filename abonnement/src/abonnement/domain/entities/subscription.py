"""
Subscription entity - Domain model for store-billed user subscriptions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from abonnement.domain.exceptions.subscription import (
    InvalidSubscriptionStatusError,
    ProviderNotFoundError,
)
from abonnement.domain.services.i_clock import IClock


class Provider(str, Enum):
    """Supported billing providers."""

    GOOGLE = "google"
    APPLE = "apple"

    @classmethod
    def find_by_name_opt(cls, name: Optional[str]) -> Optional["Provider"]:
        """
        Resolve provider by name, ignoring case.

        Args:
            name: Free-text provider name

        Returns:
            Matching provider, or None if nothing matches
        """
        if not name:
            return None
        return cls.__members__.get(name.upper())

    @classmethod
    def find_by_name(cls, name: Optional[str]) -> "Provider":
        """
        Resolve provider by name, ignoring case.

        Raises:
            ProviderNotFoundError: If no provider matches
        """
        provider = cls.find_by_name_opt(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle states."""

    ACTIVE = "active"
    CANCELED = "canceled"
    EXPIRED = "expired"


class SubscriptionAction(str, Enum):
    """Lifecycle actions applied to a subscription."""

    CANCEL = "cancel"
    EXPIRE = "expire"
    RENEW = "renew"


# Every (status, action) pair not listed here is an illegal transition.
_TRANSITIONS: dict[
    tuple[SubscriptionStatus, SubscriptionAction], SubscriptionStatus
] = {
    (
        SubscriptionStatus.ACTIVE,
        SubscriptionAction.CANCEL,
    ): SubscriptionStatus.CANCELED,
    (
        SubscriptionStatus.ACTIVE,
        SubscriptionAction.EXPIRE,
    ): SubscriptionStatus.EXPIRED,
    (
        SubscriptionStatus.ACTIVE,
        SubscriptionAction.RENEW,
    ): SubscriptionStatus.ACTIVE,
    (
        SubscriptionStatus.CANCELED,
        SubscriptionAction.RENEW,
    ): SubscriptionStatus.ACTIVE,
    (
        SubscriptionStatus.EXPIRED,
        SubscriptionAction.RENEW,
    ): SubscriptionStatus.ACTIVE,
}


def next_status(
    status: SubscriptionStatus,
    action: SubscriptionAction,
    subscription_id: Optional[int] = None,
) -> SubscriptionStatus:
    """
    Compute the status reached by applying action to status.

    Raises:
        InvalidSubscriptionStatusError: If the transition is not allowed
    """
    try:
        return _TRANSITIONS[(status, action)]
    except KeyError:
        raise InvalidSubscriptionStatusError(
            action.value, status.value, subscription_id
        ) from None


@dataclass
class Subscription:
    """
    Subscription entity representing a user's store subscription.

    Business rules:
    - A user holds one subscription per (provider, name) pair
    - Status transitions: active -> canceled/expired
    - Canceled and expired are terminal until renewed
    - ID is assigned by persistence and never changes afterwards
    """

    user_id: int
    name: str
    provider: Provider
    expiration_date: datetime
    status: SubscriptionStatus = field(default=SubscriptionStatus.ACTIVE)
    id: Optional[int] = field(default=None)

    def __post_init__(self):
        """Validate subscription data after initialization."""
        if self.user_id is None or self.user_id <= 0:
            raise ValueError("User ID must be a positive integer")

        if not self.name or not self.name.strip():
            raise ValueError("Subscription name is required")

    def is_active(self) -> bool:
        """Check if subscription is in active status."""
        return self.status == SubscriptionStatus.ACTIVE

    def matches(self, provider: Provider, name: str) -> bool:
        """Check if this subscription is the renewal target for provider/name."""
        return self.provider == provider and self.name == name

    def cancel(self) -> None:
        """Cancel subscription (user-initiated)."""
        self.status = next_status(self.status, SubscriptionAction.CANCEL, self.id)

    def expire(self, clock: IClock) -> None:
        """Mark subscription as expired now (system-initiated)."""
        self.status = next_status(self.status, SubscriptionAction.EXPIRE, self.id)
        self.expiration_date = clock.now()

    def renew(self, expiration_date: datetime) -> None:
        """Reactivate subscription until new expiration date."""
        self.status = next_status(self.status, SubscriptionAction.RENEW, self.id)
        self.expiration_date = expiration_date

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "provider": self.provider.value,
            "status": self.status.value,
            "expiration_date": self.expiration_date.isoformat(),
        }
