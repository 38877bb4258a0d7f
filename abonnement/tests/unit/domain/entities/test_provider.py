"""
Unit tests for Provider resolution.

Usage:
    pytest abonnement/tests/unit/domain/entities/test_provider.py
"""

import pytest

from abonnement.domain.entities.subscription import Provider
from abonnement.domain.exceptions import ProviderNotFoundError


class TestProvider:
    """Unit tests for Provider lookup by name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("google", Provider.GOOGLE),
            ("GOOGLE", Provider.GOOGLE),
            ("Google", Provider.GOOGLE),
            ("apple", Provider.APPLE),
            ("APPLE", Provider.APPLE),
        ],
    )
    def test_find_by_name_opt_ignores_case(self, name, expected):
        """Test optional lookup is case-insensitive."""
        assert Provider.find_by_name_opt(name) is expected

    @pytest.mark.parametrize(
        "name", ["bogus", "", None, "googl", " google ", " GOOGLE ", "apple\n"]
    )
    def test_find_by_name_opt_returns_none(self, name):
        """Test optional lookup returns None for unknown names."""
        assert Provider.find_by_name_opt(name) is None

    def test_find_by_name(self):
        """Test strict lookup resolves known provider."""
        assert Provider.find_by_name("apple") is Provider.APPLE

    def test_find_by_name_raises_for_unknown(self):
        """Test strict lookup fails with lookup error."""
        with pytest.raises(ProviderNotFoundError) as exc_info:
            Provider.find_by_name("bogus")

        assert isinstance(exc_info.value, LookupError)
        assert exc_info.value.code == "PROVIDER_NOT_FOUND"
        assert "bogus" in exc_info.value.message
