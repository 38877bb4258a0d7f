"""Domain service interfaces."""

from abonnement.domain.services.i_clock import IClock

__all__ = [
    "IClock",
]
