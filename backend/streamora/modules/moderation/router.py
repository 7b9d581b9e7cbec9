"""API router for moderation endpoints. Admin only."""

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import (
    InputValidationError,
    PreconditionNotMetError,
    StorageError,
)
from streamora.core.store import RecordStore, get_store
from streamora.modules.identity.dependencies import require_admin, resolve_creator_handle
from streamora.modules.identity.models import Session
from streamora.modules.moderation.models import StrikeOutcome, StrikeSummary
from streamora.modules.moderation.schemas import ClearStrikesResponse, StrikeRequest
from streamora.modules.moderation.service import ModerationService

router = APIRouter(prefix="/moderation", tags=["moderation"])


@router.get("/creators/{handle}", response_model=StrikeSummary)
def get_strike_summary(
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Get a creator's strike count and standing."""
    return ModerationService(store).strike_summary(handle)


@router.post("/creators/{handle}/strikes", response_model=StrikeOutcome)
def issue_strike(
    request: StrikeRequest,
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Raise a creator's strike level."""
    try:
        return ModerationService(store).issue_strike(handle, request.new_count)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except PreconditionNotMetError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.delete("/creators/{handle}/strikes", response_model=ClearStrikesResponse)
def clear_strikes(
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Reset a creator's strikes to zero."""
    try:
        previous = ModerationService(store).clear_strikes(handle)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return ClearStrikesResponse(handle=handle, previous_count=previous)
