"""Monetization module.

Eligibility, the request/approve/activate lifecycle, ad rates and payouts.
"""

from streamora.modules.monetization.models import (
    CPM_RATES,
    REVENUE_SHARES,
    Decision,
    MonetizationRequest,
    PayoutRequest,
    RequestStatus,
)
from streamora.modules.monetization.service import (
    MonetizationService,
    compute_cpm_rate,
    compute_creator_earnings,
    compute_revenue_share,
)

__all__ = [
    "CPM_RATES",
    "REVENUE_SHARES",
    "Decision",
    "MonetizationRequest",
    "PayoutRequest",
    "RequestStatus",
    "MonetizationService",
    "compute_cpm_rate",
    "compute_creator_earnings",
    "compute_revenue_share",
]
