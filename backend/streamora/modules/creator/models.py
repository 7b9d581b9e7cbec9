"""Creator stats model.

One record per handle, created lazily with zero/false defaults the first
time it is read. Stats records are never deleted, not even for suspended
channels.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CpmRank(str, Enum):
    """Admin-assigned ad rate tier."""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PREMIUM = "premium"


class MonetizationPlan(str, Enum):
    """Revenue share plan."""
    STANDARD = "standard"
    PREMIUM = "premium"


MAX_STRIKES = 3


class CreatorStats(BaseModel):
    """Per-creator monetization and moderation state."""

    handle: str
    public_name: str = ""
    total_views: int = Field(default=0, ge=0)
    subscriber_count: int = Field(default=0, ge=0)
    estimated_earnings: float = 0.0
    total_earnings: float = 0.0
    ad_eligible: bool = False
    cpm_rank: CpmRank = CpmRank.BRONZE
    monetization_plan: MonetizationPlan = MonetizationPlan.STANDARD
    is_monetized: bool = False
    is_premium: bool = False
    is_lifetime_premium: bool = False
    is_trusted: bool = False
    strikes: int = Field(default=0, ge=0)
    paypal_email: Optional[str] = None
    ad_pin: Optional[str] = None
    monetization_approved: bool = False
    monetization_requested: bool = False

    @classmethod
    def default_for(cls, handle: str) -> "CreatorStats":
        """Build the default record for a handle with no stored stats."""
        return cls(handle=handle, public_name=handle)

    def is_suspended(self) -> bool:
        return self.strikes >= MAX_STRIKES
