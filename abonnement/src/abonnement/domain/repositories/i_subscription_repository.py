"""
Subscription repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from abonnement.domain.entities.subscription import Subscription


class ISubscriptionRepository(ABC):
    """
    Abstract repository interface for Subscription entity persistence.

    Implementations fail fast: storage errors propagate to the caller.
    """

    @abstractmethod
    def find_all(self) -> list[Subscription]:
        """
        List every stored subscription.

        Returns:
            List of subscription entities
        """

    @abstractmethod
    def find_by_id(self, subscription_id: int) -> Optional[Subscription]:
        """
        Retrieve subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            Subscription entity if found, None otherwise
        """

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Subscription]:
        """
        List all subscriptions owned by user (any status).

        Args:
            user_id: Owning user identifier

        Returns:
            List of subscription entities, empty if none
        """

    @abstractmethod
    def insert(self, subscription: Subscription) -> Subscription:
        """
        Persist a new subscription.

        Args:
            subscription: Subscription entity without ID

        Returns:
            Created subscription with storage-generated ID
        """

    @abstractmethod
    def update(self, subscription: Subscription) -> Subscription:
        """
        Update existing subscription.

        Args:
            subscription: Subscription entity with updated fields

        Returns:
            Updated subscription entity
        """

    @abstractmethod
    def upsert(self, subscription: Subscription) -> Subscription:
        """
        Insert subscription if it has no ID yet, update it otherwise.

        Args:
            subscription: Subscription entity to persist

        Returns:
            Persisted subscription entity
        """

    @abstractmethod
    def delete(self, subscription_id: int) -> bool:
        """
        Delete subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            True if a subscription existed and was removed
        """
