"""
Clock interface.

Domain abstraction over the current time so lifecycle changes
stay deterministic under test.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Interface for current-time source."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Get current instant.

        Returns:
            Timezone-aware datetime
        """
