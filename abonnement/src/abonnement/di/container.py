"""
Dependency Injection Container for Abonnement.

Wires the subscription service around a caller-supplied repository.
"""

from typing import Optional

from abonnement.application.mappers.create_subscription_mapper import (
    CreateSubscriptionMapper,
)
from abonnement.application.services.subscription_service import (
    SubscriptionService,
)
from abonnement.application.validators.create_subscription_validator import (
    CreateSubscriptionValidator,
)
from abonnement.config.settings import Settings, get_settings
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from abonnement.domain.services.i_clock import IClock
from abonnement.infrastructure.clock.system_clock import SystemClock
from abonnement.infrastructure.monitoring import get_logger, setup_logging


class DIContainer:
    """
    Dependency Injection Container.

    Lazily builds and caches service instances. Storage is supplied
    by the caller; everything else has a default.
    """

    def __init__(
        self,
        subscription_repository: ISubscriptionRepository,
        clock: Optional[IClock] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize container.

        Args:
            subscription_repository: Subscription storage implementation
            clock: Optional clock (UTC system clock if None)
            settings: Optional settings (global settings if None)
        """
        self._subscription_repository = subscription_repository
        self._clock = clock
        self._settings = settings

        self._validator: Optional[CreateSubscriptionValidator] = None
        self._mapper: Optional[CreateSubscriptionMapper] = None
        self._subscription_service: Optional[SubscriptionService] = None

    def initialize(self) -> None:
        """Configure logging from settings."""
        setup_logging(
            level=self.settings.LOG_LEVEL,
            json_logs=self.settings.LOG_JSON,
        )
        get_logger(__name__).info(
            f"{self.settings.APP_NAME} {self.settings.APP_VERSION} "
            f"initialized (ENV={self.settings.ENV})"
        )

    # Configuration Getters

    @property
    def settings(self) -> Settings:
        """Get settings instance."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # Infrastructure Getters

    @property
    def subscription_repository(self) -> ISubscriptionRepository:
        """Get subscription repository."""
        return self._subscription_repository

    @property
    def clock(self) -> IClock:
        """Get clock instance."""
        if self._clock is None:
            self._clock = SystemClock()
        return self._clock

    # Application Getters

    @property
    def validator(self) -> CreateSubscriptionValidator:
        """Get create subscription validator."""
        if self._validator is None:
            self._validator = CreateSubscriptionValidator()
        return self._validator

    @property
    def mapper(self) -> CreateSubscriptionMapper:
        """Get create subscription mapper."""
        if self._mapper is None:
            self._mapper = CreateSubscriptionMapper()
        return self._mapper

    @property
    def subscription_service(self) -> SubscriptionService:
        """Get subscription service."""
        if self._subscription_service is None:
            self._subscription_service = SubscriptionService(
                subscription_repository=self.subscription_repository,
                validator=self.validator,
                mapper=self.mapper,
                clock=self.clock,
            )
        return self._subscription_service
