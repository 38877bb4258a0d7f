"""
Unit tests for CreateSubscriptionValidator.

Tests field rules and error accumulation.

Usage:
    pytest abonnement/tests/unit/application/test_create_subscription_validator.py
"""

from datetime import datetime, timedelta, timezone
from itertools import combinations

import pytest

from abonnement.application.dto.subscription_dto import CreateSubscriptionDto
from abonnement.application.validators.create_subscription_validator import (
    CreateSubscriptionValidator,
)
from abonnement.domain.value_objects.validation_result import Error

EXPIRATION = datetime.now(timezone.utc) + timedelta(hours=1)

VALID_FIELDS = {
    "user_id": 123,
    "name": "name",
    "provider": "GOOGLE",
    "expiration_date": EXPIRATION,
}

EXPECTED_ERRORS = {
    "user_id": Error.of(code=100, message="userId is invalid"),
    "name": Error.of(code=101, message="name is invalid"),
    "provider": Error.of(code=102, message="provider is invalid"),
    "expiration_date": Error.of(code=103, message="expirationDate is invalid"),
}

FIELD_ORDER = ["user_id", "name", "provider", "expiration_date"]


class TestCreateSubscriptionValidator:
    """Unit tests for CreateSubscriptionValidator."""

    validator = CreateSubscriptionValidator()

    # ============================================================
    # Passing tests
    # ============================================================

    def test_valid_dto_has_no_errors(self):
        """Test fully populated request passes."""
        result = self.validator.validate(CreateSubscriptionDto(**VALID_FIELDS))

        assert result.has_errors() is False

    @pytest.mark.parametrize("provider", ["google", "Apple", "APPLE"])
    def test_provider_name_is_case_insensitive(self, provider):
        """Test provider accepted in any case."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, "provider": provider})

        assert self.validator.validate(dto).has_errors() is False

    # ============================================================
    # Single field failures
    # ============================================================

    @pytest.mark.parametrize("field", FIELD_ORDER)
    def test_missing_field_reports_single_error(self, field):
        """Test each missing field yields exactly its error."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, field: None})

        result = self.validator.validate(dto)

        assert result.errors == (EXPECTED_ERRORS[field],)

    def test_unknown_provider(self):
        """Test unsupported provider name is rejected."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, "provider": "bogus"})

        result = self.validator.validate(dto)

        assert result.errors == (EXPECTED_ERRORS["provider"],)

    @pytest.mark.parametrize("provider", [" google ", "apple\n", "\tAPPLE"])
    def test_padded_provider_is_rejected(self, provider):
        """Test provider must match a name exactly apart from case."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, "provider": provider})

        result = self.validator.validate(dto)

        assert [e.code for e in result.errors] == [102]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        """Test blank name is rejected."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, "name": name})

        result = self.validator.validate(dto)

        assert result.errors == (EXPECTED_ERRORS["name"],)

    def test_non_positive_user_id(self):
        """Test zero user ID is rejected."""
        dto = CreateSubscriptionDto(**{**VALID_FIELDS, "user_id": 0})

        result = self.validator.validate(dto)

        assert result.errors == (EXPECTED_ERRORS["user_id"],)

    # ============================================================
    # Accumulation tests
    # ============================================================

    @pytest.mark.parametrize(
        "missing",
        [
            combo
            for size in range(2, len(FIELD_ORDER) + 1)
            for combo in combinations(FIELD_ORDER, size)
        ],
    )
    def test_errors_accumulate_in_rule_order(self, missing):
        """Test every missing field is reported, in fixed order."""
        dto = CreateSubscriptionDto(
            **{k: (None if k in missing else v) for k, v in VALID_FIELDS.items()}
        )

        result = self.validator.validate(dto)

        assert result.errors == tuple(EXPECTED_ERRORS[f] for f in missing)

    def test_empty_dto_reports_all_errors(self):
        """Test empty request yields codes 100..103."""
        result = self.validator.validate(CreateSubscriptionDto())

        assert [e.code for e in result.errors] == [100, 101, 102, 103]
