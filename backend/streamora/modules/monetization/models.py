"""Monetization models: review requests, payout requests and rate tables."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field

from streamora.modules.creator.models import CpmRank, MonetizationPlan


class RequestStatus(str, Enum):
    """Review status shared by monetization and payout requests."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Decision(str, Enum):
    """Admin decision on a pending request."""
    APPROVED = "approved"
    REJECTED = "rejected"


# Ad revenue per 1000 monetized views, by rank
CPM_RATES = MappingProxyType({
    CpmRank.BRONZE: 3.0,
    CpmRank.SILVER: 5.0,
    CpmRank.GOLD: 8.0,
    CpmRank.PREMIUM: 10.0,
})

# Creator's share of ad revenue, by plan; the platform keeps the rest
REVENUE_SHARES = MappingProxyType({
    MonetizationPlan.STANDARD: 0.55,
    MonetizationPlan.PREMIUM: 0.70,
})

PAYOUT_SLA = "2-5 business days"


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"


class MonetizationRequest(BaseModel):
    """Creator's request for admin monetization review. One per handle."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    secret_handle: str
    public_name: str
    requested_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: RequestStatus = RequestStatus.PENDING

    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING


class PayoutRequest(BaseModel):
    """Creator's request to be paid out.

    The amount is a snapshot of total earnings at request time.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    secret_handle: str
    public_name: str
    amount: float = Field(..., ge=0)
    paypal_email: str
    requested_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: RequestStatus = RequestStatus.PENDING

    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING
