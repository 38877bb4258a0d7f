"""
Create subscription validator.

Checks every field of an inbound request and collects all failures.
"""

from abonnement.application.dto.subscription_dto import CreateSubscriptionDto
from abonnement.domain.entities.subscription import Provider
from abonnement.domain.value_objects.validation_result import (
    Error,
    ValidationResult,
)

INVALID_USER_ID = Error.of(code=100, message="userId is invalid")
INVALID_NAME = Error.of(code=101, message="name is invalid")
INVALID_PROVIDER = Error.of(code=102, message="provider is invalid")
INVALID_EXPIRATION_DATE = Error.of(code=103, message="expirationDate is invalid")


class CreateSubscriptionValidator:
    """
    Field-level validator for CreateSubscriptionDto.

    Rules run in a fixed order (user_id, name, provider, expiration_date)
    and never stop at the first failure.
    """

    def validate(self, dto: CreateSubscriptionDto) -> ValidationResult:
        """
        Validate create request.

        Args:
            dto: Inbound create request

        Returns:
            Validation result with one error per invalid field
        """
        result = ValidationResult()

        if dto.user_id is None or dto.user_id <= 0:
            result.add(INVALID_USER_ID)

        if dto.name is None or not dto.name.strip():
            result.add(INVALID_NAME)

        if dto.provider is None or Provider.find_by_name_opt(dto.provider) is None:
            result.add(INVALID_PROVIDER)

        if dto.expiration_date is None:
            result.add(INVALID_EXPIRATION_DATE)

        return result
