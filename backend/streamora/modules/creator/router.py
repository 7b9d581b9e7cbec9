"""API router for creator stats endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import InputValidationError, StorageError
from streamora.core.store import RecordStore, get_store
from streamora.modules.creator.schemas import CreatorStatsResponse, CreatorStatsUpdate
from streamora.modules.creator.service import CreatorStatsService
from streamora.modules.identity.dependencies import (
    require_admin,
    require_session,
    resolve_creator_handle,
)
from streamora.modules.identity.models import Session

router = APIRouter(prefix="/creators", tags=["creators"])


@router.get("/me/stats", response_model=CreatorStatsResponse)
def get_my_stats(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the signed-in creator's stats."""
    stats = CreatorStatsService(store).get_stats(session.secret_handle)
    return CreatorStatsResponse.model_validate(stats.model_dump())


@router.get("/{handle}/stats", response_model=CreatorStatsResponse)
def get_creator_stats(
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Get any creator's stats."""
    stats = CreatorStatsService(store).get_stats(handle)
    return CreatorStatsResponse.model_validate(stats.model_dump())


@router.patch("/{handle}/stats", response_model=CreatorStatsResponse)
def update_creator_stats(
    request: CreatorStatsUpdate,
    _: Session = Depends(require_admin),
    handle: str = Depends(resolve_creator_handle),
    store: RecordStore = Depends(get_store),
):
    """Edit a creator's audience and earnings figures."""
    try:
        stats = CreatorStatsService(store).update_stats(handle, request)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return CreatorStatsResponse.model_validate(stats.model_dump())
