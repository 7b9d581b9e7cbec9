"""API router for monetization and payout endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import (
    InputValidationError,
    PreconditionNotMetError,
    StorageError,
)
from streamora.core.store import RecordStore, get_store
from streamora.modules.creator.schemas import CreatorStatsResponse
from streamora.modules.identity.dependencies import (
    require_admin,
    require_session,
    resolve_creator_handle,
)
from streamora.modules.identity.models import Session
from streamora.modules.monetization.models import (
    CPM_RATES,
    REVENUE_SHARES,
    MonetizationRequest,
    PayoutRequest,
)
from streamora.modules.monetization.schemas import (
    ActivationRequest,
    CreatorFlagsUpdate,
    EarningsReport,
    EligibilityReport,
    MonetizationRequestListResponse,
    PayoutCreate,
    PayoutRequestListResponse,
    RateTableResponse,
    ResolveRequest,
)
from streamora.modules.monetization.service import MonetizationService

router = APIRouter(prefix="/monetization", tags=["monetization"])


def _service_error(e: Exception) -> HTTPException:
    """Map a service exception to an HTTP error."""
    if isinstance(e, InputValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    if isinstance(e, PreconditionNotMetError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


# ==================== Creator endpoints ====================

@router.get("/rates", response_model=RateTableResponse)
def get_rates(store: RecordStore = Depends(get_store)):
    """Get the CPM and revenue share tables."""
    service = MonetizationService(store)
    return RateTableResponse(
        cpm_rates=dict(CPM_RATES),
        revenue_shares=dict(REVENUE_SHARES),
        min_payout_amount=service.min_payout_amount,
    )


@router.get("/eligibility", response_model=EligibilityReport)
def get_eligibility(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the signed-in creator's eligibility."""
    return MonetizationService(store).eligibility_report(session.secret_handle)


@router.get("/earnings", response_model=EarningsReport)
def get_earnings(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the signed-in creator's rate, share and payout availability."""
    return MonetizationService(store).earnings_report(session.secret_handle)


@router.post("/request", response_model=MonetizationRequest)
def request_monetization(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Ask for a monetization review."""
    try:
        return MonetizationService(store).request_monetization(
            session.secret_handle, session.public_name
        )
    except StorageError as e:
        raise _service_error(e)


@router.post("/activate", response_model=CreatorStatsResponse)
def activate_monetization(
    request: ActivationRequest,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Activate monetization with PayPal email and Ad PIN."""
    try:
        stats = MonetizationService(store).activate_monetization(
            session.secret_handle, request.paypal_email, request.ad_pin
        )
    except (InputValidationError, PreconditionNotMetError, StorageError) as e:
        raise _service_error(e)
    return CreatorStatsResponse.model_validate(stats.model_dump())


@router.post("/payouts", response_model=PayoutRequest, status_code=status.HTTP_201_CREATED)
def request_payout(
    request: PayoutCreate,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Request a payout of total earnings."""
    try:
        return MonetizationService(store).request_payout(
            session.secret_handle, session.public_name, request.paypal_email
        )
    except (InputValidationError, PreconditionNotMetError, StorageError) as e:
        raise _service_error(e)


@router.get("/payouts/mine", response_model=PayoutRequestListResponse)
def get_my_payouts(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the signed-in creator's payout history."""
    payouts = MonetizationService(store).payout_history(session.secret_handle)
    return PayoutRequestListResponse(
        requests=payouts,
        total=len(payouts),
        pending_count=sum(1 for p in payouts if p.is_pending()),
    )


# ==================== Admin endpoints ====================

@router.get("/requests", response_model=MonetizationRequestListResponse)
def list_monetization_requests(
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Get the monetization review queue."""
    requests = MonetizationService(store).list_monetization_requests()
    return MonetizationRequestListResponse(
        requests=requests,
        total=len(requests),
        pending_count=sum(1 for r in requests if r.is_pending()),
    )


@router.post("/requests/{request_id}/resolve", response_model=MonetizationRequest)
def resolve_monetization_request(
    request_id: str,
    request: ResolveRequest,
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Approve or reject a monetization request."""
    try:
        resolved = MonetizationService(store).resolve_monetization_request(
            request_id, request.decision
        )
    except (InputValidationError, PreconditionNotMetError, StorageError) as e:
        raise _service_error(e)
    if not resolved:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Monetization request {request_id} not found",
        )
    return resolved


@router.get("/payouts", response_model=PayoutRequestListResponse)
def list_payout_requests(
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Get the payout review queue."""
    payouts = MonetizationService(store).list_payout_requests()
    return PayoutRequestListResponse(
        requests=payouts,
        total=len(payouts),
        pending_count=sum(1 for p in payouts if p.is_pending()),
    )


@router.post("/payouts/{request_id}/resolve", response_model=PayoutRequest)
def resolve_payout_request(
    request_id: str,
    request: ResolveRequest,
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Approve or reject a payout request."""
    try:
        resolved = MonetizationService(store).resolve_payout_request(request_id, request.decision)
    except (InputValidationError, PreconditionNotMetError, StorageError) as e:
        raise _service_error(e)
    if not resolved:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Payout request {request_id} not found",
        )
    return resolved


@router.patch("/creators/{handle}/flags", response_model=CreatorStatsResponse)
def set_creator_flags(
    request: CreatorFlagsUpdate,
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Set a creator's rank, plan and status flags."""
    try:
        stats = MonetizationService(store).set_creator_flags(handle, request)
    except (InputValidationError, StorageError) as e:
        raise _service_error(e)
    return CreatorStatsResponse.model_validate(stats.model_dump())
