"""
Create subscription mapper - DTO to entity transform.
"""

from abonnement.application.dto.subscription_dto import CreateSubscriptionDto
from abonnement.domain.entities.subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)


class CreateSubscriptionMapper:
    """Builds new, unpersisted subscriptions from validated requests."""

    def map(self, dto: CreateSubscriptionDto) -> Subscription:
        """
        Map validated request to a new active subscription.

        Args:
            dto: Request that already passed validation

        Returns:
            Subscription entity without ID

        Raises:
            ProviderNotFoundError: If provider does not resolve
        """
        return Subscription(
            user_id=dto.user_id,
            name=dto.name,
            provider=Provider.find_by_name(dto.provider),
            expiration_date=dto.expiration_date,
            status=SubscriptionStatus.ACTIVE,
        )
