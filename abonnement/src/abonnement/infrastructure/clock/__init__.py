"""Clock implementations."""

from abonnement.infrastructure.clock.system_clock import SystemClock

__all__ = [
    "SystemClock",
]
