"""Monetization engine.

Decides eligibility, runs the request/approve/activate lifecycle, computes
ad rates and revenue shares, and manages payout requests. Approval and
activation are separate steps: an approved creator is only monetized once
they submit PayPal details and their Ad PIN.
"""

import logging
from typing import Optional, Union

from streamora.core.config import settings
from streamora.core.exceptions import InputValidationError, PreconditionNotMetError
from streamora.core.logging import log_info, log_warning
from streamora.core.store import RecordStore
from streamora.modules.creator.models import CpmRank, CreatorStats, MonetizationPlan
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.monetization.models import (
    CPM_RATES,
    PAYOUT_SLA,
    REVENUE_SHARES,
    Decision,
    MonetizationRequest,
    PayoutRequest,
    RequestStatus,
    format_currency,
)
from streamora.modules.monetization.repository import (
    MonetizationRequestRepository,
    PayoutRequestRepository,
)
from streamora.modules.monetization.schemas import (
    CreatorFlagsUpdate,
    EarningsReport,
    EligibilityReport,
)
from streamora.modules.notification.models import NotificationCategory
from streamora.modules.notification.service import NotificationService

logger = logging.getLogger(__name__)

STRIKES_BLOCKING_MONETIZATION = 2


def compute_cpm_rate(rank: Union[CpmRank, str]) -> float:
    """Get ad revenue per 1000 monetized views for a rank.

    Raises:
        InputValidationError: Unknown rank
    """
    try:
        return CPM_RATES[CpmRank(rank)]
    except ValueError:
        raise InputValidationError(f"Unknown CPM rank: {rank}")


def compute_revenue_share(plan: Union[MonetizationPlan, str]) -> float:
    """Get the creator's fraction of ad revenue for a plan.

    Raises:
        InputValidationError: Unknown plan
    """
    try:
        return REVENUE_SHARES[MonetizationPlan(plan)]
    except ValueError:
        raise InputValidationError(f"Unknown monetization plan: {plan}")


def compute_creator_earnings(
    monetized_views: int,
    rank: Union[CpmRank, str],
    plan: Union[MonetizationPlan, str],
) -> float:
    """Creator's cut of ad revenue for a number of monetized views, in dollars."""
    if monetized_views < 0:
        raise InputValidationError("Monetized views cannot be negative")
    gross = monetized_views / 1000 * compute_cpm_rate(rank)
    return round(gross * compute_revenue_share(plan), 2)


def _is_valid_paypal_email(email: str) -> bool:
    return "@" in email


class MonetizationService:
    """Service for the monetization lifecycle and payouts."""

    def __init__(
        self,
        store: RecordStore,
        min_subscribers: Optional[int] = None,
        min_views: Optional[int] = None,
        min_payout_amount: Optional[float] = None,
        deduct_on_approval: Optional[bool] = None,
    ):
        self.stats_repository = CreatorStatsRepository(store)
        self.request_repository = MonetizationRequestRepository(store)
        self.payout_repository = PayoutRequestRepository(store)
        self.notifications = NotificationService(store)

        self.min_subscribers = (
            min_subscribers if min_subscribers is not None
            else settings.MONETIZATION_MIN_SUBSCRIBERS
        )
        self.min_views = min_views if min_views is not None else settings.MONETIZATION_MIN_VIEWS
        self.min_payout_amount = (
            min_payout_amount if min_payout_amount is not None
            else settings.MIN_PAYOUT_AMOUNT
        )
        self.deduct_on_approval = (
            deduct_on_approval if deduct_on_approval is not None
            else settings.PAYOUT_DEDUCT_ON_APPROVAL
        )

    # ==================== Eligibility ====================

    def evaluate_eligibility(self, stats: CreatorStats) -> bool:
        """Whether a creator may activate monetization.

        Either enough subscribers or an explicit admin approval opens the
        gate. The view count is shown to creators but does not gate.
        """
        return stats.subscriber_count >= self.min_subscribers or stats.monetization_approved

    def eligibility_report(self, handle: str) -> EligibilityReport:
        stats = self.stats_repository.get(handle)
        return EligibilityReport(
            handle=handle,
            subscriber_count=stats.subscriber_count,
            total_views=stats.total_views,
            min_subscribers=self.min_subscribers,
            min_views=self.min_views,
            meets_subscriber_threshold=stats.subscriber_count >= self.min_subscribers,
            meets_view_threshold=stats.total_views >= self.min_views,
            monetization_approved=stats.monetization_approved,
            monetization_requested=stats.monetization_requested,
            is_monetized=stats.is_monetized,
            eligible=self.evaluate_eligibility(stats),
        )

    # ==================== Review requests ====================

    def request_monetization(self, handle: str, public_name: str) -> MonetizationRequest:
        """File or refresh the creator's monetization review request.

        A creator has at most one request. Asking again replaces it with a
        fresh pending request under the same ID.
        """
        existing = self.request_repository.get_by_handle(handle)
        request = MonetizationRequest(secret_handle=handle, public_name=public_name)
        if existing:
            request.id = existing.id

        self.request_repository.upsert(request)
        self.stats_repository.update(handle, monetization_requested=True)

        log_info(
            logger,
            "Monetization requested",
            handle=handle,
            request_id=request.id,
            refreshed=existing is not None,
        )
        return request

    def resolve_monetization_request(
        self,
        request_id: str,
        decision: Union[Decision, str],
    ) -> Optional[MonetizationRequest]:
        """Approve or reject a pending review request.

        Approval unlocks activation; it never monetizes the creator directly.

        Returns:
            Optional[MonetizationRequest]: Resolved request, None if not found

        Raises:
            InputValidationError: Unknown decision
            PreconditionNotMetError: Request was already resolved
        """
        decision = self._parse_decision(decision)

        request = self.request_repository.get_by_id(request_id)
        if request is None:
            return None
        if not request.is_pending():
            raise PreconditionNotMetError(f"Request already {request.status.value}")

        if decision == Decision.APPROVED:
            self.stats_repository.update(request.secret_handle, monetization_approved=True)
            message = (
                "🎉 Your monetization request has been approved! "
                "Complete activation in the Monetization section."
            )
        else:
            message = (
                "Your monetization request has been reviewed and was not approved "
                "at this time. You may reapply after growing your channel."
            )

        resolved = self.request_repository.set_status(request_id, RequestStatus(decision.value))
        self.notifications.send(request.secret_handle, NotificationCategory.MONETIZATION, message)

        log_info(
            logger,
            "Monetization request resolved",
            request_id=request_id,
            handle=request.secret_handle,
            decision=decision.value,
        )
        return resolved

    def list_monetization_requests(self) -> list[MonetizationRequest]:
        return self.request_repository.get_all()

    # ==================== Activation ====================

    def activate_monetization(self, handle: str, paypal_email: str, ad_pin: str) -> CreatorStats:
        """Turn on monetization with the creator's PayPal email and Ad PIN.

        Raises:
            InputValidationError: Blank email or PIN, or email without "@"
            PreconditionNotMetError: Creator is not eligible, or is
                demonetized by strikes
        """
        paypal_email = (paypal_email or "").strip()
        ad_pin = (ad_pin or "").strip()

        if not paypal_email or not ad_pin:
            raise InputValidationError("Please fill in all fields")
        if not _is_valid_paypal_email(paypal_email):
            raise InputValidationError("Please enter a valid PayPal email")

        stats = self.stats_repository.get(handle)
        if not self.evaluate_eligibility(stats):
            raise PreconditionNotMetError("Creator is not eligible for monetization")
        if stats.strikes >= STRIKES_BLOCKING_MONETIZATION:
            raise PreconditionNotMetError("Monetization is disabled for this channel")

        stats = self.stats_repository.update(
            handle,
            is_monetized=True,
            ad_eligible=True,
            paypal_email=paypal_email,
            ad_pin=ad_pin,
        )
        log_info(logger, "Monetization activated", handle=handle)
        return stats

    # ==================== Earnings ====================

    def earnings_report(self, handle: str) -> EarningsReport:
        stats = self.stats_repository.get(handle)
        share = compute_revenue_share(stats.monetization_plan)
        return EarningsReport(
            handle=handle,
            cpm_rank=stats.cpm_rank,
            cpm_rate=compute_cpm_rate(stats.cpm_rank),
            monetization_plan=stats.monetization_plan,
            creator_share=share,
            platform_share=round(1 - share, 2),
            estimated_earnings=stats.estimated_earnings,
            total_earnings=stats.total_earnings,
            min_payout_amount=self.min_payout_amount,
            can_request_payout=stats.total_earnings >= self.min_payout_amount,
        )

    # ==================== Payouts ====================

    def request_payout(
        self,
        handle: str,
        public_name: str,
        paypal_email: Optional[str] = None,
    ) -> PayoutRequest:
        """Request a payout of the creator's total earnings.

        Args:
            handle: Creator handle
            public_name: Creator display name
            paypal_email: Payout address, defaults to the one on file

        Returns:
            PayoutRequest: New pending request; its amount never changes

        Raises:
            PreconditionNotMetError: Earnings below the payout minimum
            InputValidationError: No usable PayPal email
        """
        stats = self.stats_repository.get(handle)

        if stats.total_earnings < self.min_payout_amount:
            raise PreconditionNotMetError(
                f"Minimum payout is {format_currency(self.min_payout_amount)}"
            )

        email = (paypal_email or "").strip() or (stats.paypal_email or "").strip()
        if not email:
            raise InputValidationError("Please enter your PayPal email")
        if not _is_valid_paypal_email(email):
            raise InputValidationError("Please enter a valid PayPal email")

        payout = self.payout_repository.create(
            PayoutRequest(
                secret_handle=handle,
                public_name=public_name,
                amount=stats.total_earnings,
                paypal_email=email,
            )
        )
        log_info(
            logger,
            "Payout requested",
            handle=handle,
            payout_id=payout.id,
            amount=payout.amount,
        )
        return payout

    def resolve_payout_request(
        self,
        request_id: str,
        decision: Union[Decision, str],
    ) -> Optional[PayoutRequest]:
        """Approve or reject a pending payout request.

        Returns:
            Optional[PayoutRequest]: Resolved request, None if not found

        Raises:
            InputValidationError: Unknown decision
            PreconditionNotMetError: Request was already resolved
        """
        decision = self._parse_decision(decision)

        payout = self.payout_repository.get_by_id(request_id)
        if payout is None:
            return None
        if not payout.is_pending():
            raise PreconditionNotMetError(f"Payout already {payout.status.value}")

        amount = format_currency(payout.amount)
        if decision == Decision.APPROVED:
            if self.deduct_on_approval:
                self._deduct_earnings(payout)
            message = (
                f"✅ Your payout of {amount} has been approved and will be sent "
                f"to your PayPal within {PAYOUT_SLA}."
            )
        else:
            message = (
                f"Your payout request of {amount} was not approved at this time. "
                "Please contact support for more information."
            )

        resolved = self.payout_repository.set_status(request_id, RequestStatus(decision.value))
        self.notifications.send(payout.secret_handle, NotificationCategory.PAYMENT, message)

        log_info(
            logger,
            "Payout request resolved",
            payout_id=request_id,
            handle=payout.secret_handle,
            decision=decision.value,
            amount=payout.amount,
        )
        return resolved

    def list_payout_requests(self) -> list[PayoutRequest]:
        return self.payout_repository.get_all()

    def payout_history(self, handle: str) -> list[PayoutRequest]:
        return self.payout_repository.get_by_handle(handle)

    def _deduct_earnings(self, payout: PayoutRequest) -> None:
        stats = self.stats_repository.get(payout.secret_handle)
        remaining = max(0.0, round(stats.total_earnings - payout.amount, 2))
        self.stats_repository.update(payout.secret_handle, total_earnings=remaining)

    # ==================== Admin flags ====================

    def set_creator_flags(self, handle: str, flags: CreatorFlagsUpdate) -> CreatorStats:
        """Apply an admin override of rank, plan and status flags.

        Bypasses eligibility. Newly granted premium or trusted status sends
        the creator a congratulation.
        """
        changes = flags.model_dump(exclude_none=True)
        before = self.stats_repository.get(handle)
        stats = self.stats_repository.update(handle, **changes)

        if stats.is_monetized and stats.strikes >= STRIKES_BLOCKING_MONETIZATION:
            log_warning(
                logger,
                "Monetization re-enabled on a struck channel",
                handle=handle,
                strikes=stats.strikes,
            )

        if stats.is_premium and not before.is_premium:
            lifetime = "Lifetime " if stats.is_lifetime_premium else ""
            self.notifications.send(
                handle,
                NotificationCategory.MONETIZATION,
                f"🌟 Congratulations! You have been granted {lifetime}Premium status by the admin.",
            )
        if stats.is_trusted and not before.is_trusted:
            self.notifications.send(
                handle,
                NotificationCategory.MONETIZATION,
                "✅ You have been marked as a Trusted Creator on Streamora!",
            )

        log_info(logger, "Creator flags updated", handle=handle, changed=sorted(changes))
        return stats

    @staticmethod
    def _parse_decision(decision: Union[Decision, str]) -> Decision:
        try:
            return Decision(decision)
        except ValueError:
            raise InputValidationError(f"Unknown decision: {decision}")
