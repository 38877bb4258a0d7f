"""
Test fixtures and configuration.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable
from unittest.mock import Mock, create_autospec

import pytest

from abonnement.application.mappers.create_subscription_mapper import (
    CreateSubscriptionMapper,
)
from abonnement.application.services.subscription_service import (
    SubscriptionService,
)
from abonnement.application.validators.create_subscription_validator import (
    CreateSubscriptionValidator,
)
from abonnement.config.settings import reset_settings
from abonnement.domain.entities.subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from abonnement.domain.services.i_clock import IClock


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop cached global settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def now() -> datetime:
    """Provide fixed current instant."""
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def next_month(now: datetime) -> datetime:
    """Provide expiration instant one month after now."""
    return now + timedelta(days=30)


@pytest.fixture
def make_subscription(next_month: datetime) -> Callable[..., Subscription]:
    """Provide factory for subscriptions with sensible defaults."""

    def _make(**overrides) -> Subscription:
        fields = {
            "user_id": 12,
            "name": "premium",
            "provider": Provider.GOOGLE,
            "expiration_date": next_month,
            "status": SubscriptionStatus.ACTIVE,
        }
        fields.update(overrides)
        return Subscription(**fields)

    return _make


@pytest.fixture
def subscription_repository() -> Mock:
    """Provide mocked subscription repository."""
    repository = create_autospec(ISubscriptionRepository, instance=True)
    repository.upsert.side_effect = lambda subscription: subscription
    repository.update.side_effect = lambda subscription: subscription
    return repository


@pytest.fixture
def clock(now: datetime) -> Mock:
    """Provide mocked clock frozen at now."""
    clock = create_autospec(IClock, instance=True)
    clock.now.return_value = now
    return clock


@pytest.fixture
def service(subscription_repository: Mock, clock: Mock) -> SubscriptionService:
    """Provide service with real validator/mapper and mocked collaborators."""
    return SubscriptionService(
        subscription_repository=subscription_repository,
        validator=CreateSubscriptionValidator(),
        mapper=CreateSubscriptionMapper(),
        clock=clock,
    )
