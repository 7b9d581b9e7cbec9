"""Pydantic schemas for monetization endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from streamora.modules.creator.models import CpmRank, MonetizationPlan
from streamora.modules.monetization.models import (
    Decision,
    MonetizationRequest,
    PayoutRequest,
)


class EligibilityReport(BaseModel):
    """Both eligibility conditions and the resulting gate."""

    handle: str
    subscriber_count: int
    total_views: int
    min_subscribers: int
    min_views: int
    meets_subscriber_threshold: bool
    meets_view_threshold: bool
    monetization_approved: bool
    monetization_requested: bool
    is_monetized: bool
    eligible: bool


class EarningsReport(BaseModel):
    """Rates, shares and payout availability for a creator."""

    handle: str
    cpm_rank: CpmRank
    cpm_rate: float
    monetization_plan: MonetizationPlan
    creator_share: float
    platform_share: float
    estimated_earnings: float
    total_earnings: float
    min_payout_amount: float
    can_request_payout: bool


class RateTableResponse(BaseModel):
    cpm_rates: dict[CpmRank, float]
    revenue_shares: dict[MonetizationPlan, float]
    min_payout_amount: float


class ActivationRequest(BaseModel):
    """Request schema for monetization activation."""

    paypal_email: str = Field(default="", description="PayPal email for payouts")
    ad_pin: str = Field(default="", description="Ad PIN issued by the admin")


class PayoutCreate(BaseModel):
    """Request schema for a payout. Falls back to the email on file."""

    paypal_email: Optional[str] = None


class ResolveRequest(BaseModel):
    decision: Decision


class CreatorFlagsUpdate(BaseModel):
    """Admin flag editor request. Only the given fields are changed."""

    cpm_rank: Optional[CpmRank] = None
    monetization_plan: Optional[MonetizationPlan] = None
    is_monetized: Optional[bool] = None
    is_premium: Optional[bool] = None
    is_lifetime_premium: Optional[bool] = None
    is_trusted: Optional[bool] = None
    monetization_approved: Optional[bool] = None


class MonetizationRequestListResponse(BaseModel):
    requests: list[MonetizationRequest]
    total: int
    pending_count: int


class PayoutRequestListResponse(BaseModel):
    requests: list[PayoutRequest]
    total: int
    pending_count: int
