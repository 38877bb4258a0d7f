"""
Subscription Data Transfer Objects.

Inbound requests arrive unvalidated: every field may be missing.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CreateSubscriptionDto:
    """Request DTO for creating or renewing a subscription."""

    user_id: Optional[int] = None
    name: Optional[str] = None
    provider: Optional[str] = None  # google, apple (any case)
    expiration_date: Optional[datetime] = None
