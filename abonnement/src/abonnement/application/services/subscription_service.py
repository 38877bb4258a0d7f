"""
Subscription service - lifecycle orchestration.

Handles create-or-renew requests and guarded cancel/expire transitions.
"""

import logging
from typing import Optional

from abonnement.application.dto.subscription_dto import CreateSubscriptionDto
from abonnement.application.mappers.create_subscription_mapper import (
    CreateSubscriptionMapper,
)
from abonnement.application.validators.create_subscription_validator import (
    CreateSubscriptionValidator,
)
from abonnement.domain.entities.subscription import Provider, Subscription
from abonnement.domain.exceptions import EntityNotFoundError, ValidationError
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from abonnement.domain.services.i_clock import IClock
from abonnement.infrastructure.monitoring import operation_context

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Service managing the subscription lifecycle.

    Flow (upsert):
    1. Validate request, failing with every accumulated error
    2. Load user's subscriptions
    3. Renew the one matching (provider, name), or map a new one
    4. Persist and return

    The service keeps no state between calls and may be shared.
    """

    def __init__(
        self,
        subscription_repository: ISubscriptionRepository,
        validator: CreateSubscriptionValidator,
        mapper: CreateSubscriptionMapper,
        clock: IClock,
    ):
        """
        Initialize service.

        Args:
            subscription_repository: Subscription storage
            validator: Create request validator
            mapper: DTO to entity mapper
            clock: Current time source
        """
        self.subscription_repository = subscription_repository
        self.validator = validator
        self.mapper = mapper
        self.clock = clock

    def upsert(self, dto: CreateSubscriptionDto) -> Subscription:
        """
        Create subscription or renew the user's matching one.

        Args:
            dto: Create request

        Returns:
            Persisted subscription

        Raises:
            ValidationError: If request fails validation
        """
        with operation_context():
            return self._upsert(dto)

    def _upsert(self, dto: CreateSubscriptionDto) -> Subscription:
        validation_result = self.validator.validate(dto)
        if validation_result.has_errors():
            raise ValidationError(validation_result.errors)

        provider = Provider.find_by_name(dto.provider)
        existing = self._find_renewal_target(dto.user_id, provider, dto.name)

        if existing is not None:
            existing.renew(dto.expiration_date)
            renewed = self.subscription_repository.upsert(existing)
            logger.info(
                "Subscription renewed",
                extra={
                    "subscription_id": renewed.id,
                    "user_id": dto.user_id,
                    "provider": provider.value,
                },
            )
            return renewed

        created = self.subscription_repository.upsert(self.mapper.map(dto))
        logger.info(
            "Subscription created",
            extra={
                "subscription_id": created.id,
                "user_id": dto.user_id,
                "provider": provider.value,
            },
        )
        return created

    def cancel(self, subscription_id: int) -> None:
        """
        Cancel active subscription.

        Args:
            subscription_id: Subscription unique identifier

        Raises:
            EntityNotFoundError: If subscription does not exist
            InvalidSubscriptionStatusError: If subscription is not active
        """
        with operation_context():
            self._cancel(subscription_id)

    def _cancel(self, subscription_id: int) -> None:
        subscription = self._get_subscription(subscription_id)
        subscription.cancel()
        self.subscription_repository.update(subscription)

        logger.info(
            "Subscription canceled", extra={"subscription_id": subscription_id}
        )

    def expire(self, subscription_id: int) -> None:
        """
        Expire active subscription now.

        Args:
            subscription_id: Subscription unique identifier

        Raises:
            EntityNotFoundError: If subscription does not exist
            InvalidSubscriptionStatusError: If subscription is not active
        """
        with operation_context():
            self._expire(subscription_id)

    def _expire(self, subscription_id: int) -> None:
        subscription = self._get_subscription(subscription_id)
        subscription.expire(self.clock)
        self.subscription_repository.update(subscription)

        logger.info(
            "Subscription expired", extra={"subscription_id": subscription_id}
        )

    def _find_renewal_target(
        self, user_id: int, provider: Provider, name: str
    ) -> Optional[Subscription]:
        """Get first user subscription matching provider and name."""
        subscriptions = self.subscription_repository.find_by_user_id(user_id)
        return next(
            (s for s in subscriptions if s.matches(provider, name)),
            None,
        )

    def _get_subscription(self, subscription_id: int) -> Subscription:
        """Get subscription by ID or fail as invalid argument."""
        subscription = self.subscription_repository.find_by_id(subscription_id)
        if subscription is None:
            raise EntityNotFoundError("Subscription", subscription_id)
        return subscription
