"""
System clock backed by the host wall clock.
"""

from datetime import datetime, timezone

from abonnement.domain.services.i_clock import IClock


class SystemClock(IClock):
    """Wall-clock implementation of IClock returning UTC instants."""

    def now(self) -> datetime:
        """Get current instant in UTC."""
        return datetime.now(timezone.utc)
