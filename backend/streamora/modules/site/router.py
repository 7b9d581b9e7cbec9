"""API router for subscriptions and site events."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import InputValidationError, StorageError
from streamora.core.store import RecordStore, get_store
from streamora.modules.identity.dependencies import require_admin, require_session
from streamora.modules.identity.models import Session
from streamora.modules.site.models import SiteEvent
from streamora.modules.site.schemas import (
    EventStartRequest,
    SubscriptionListResponse,
    SubscriptionStatus,
)
from streamora.modules.site.service import SiteService

router = APIRouter(prefix="/site", tags=["site"])


@router.get("/subscriptions", response_model=SubscriptionListResponse)
def get_subscriptions(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the creators the signed-in user follows."""
    creators = SiteService(store).subscriptions(session.secret_handle)
    return SubscriptionListResponse(creators=creators, total=len(creators))


@router.get("/subscriptions/{creator}", response_model=SubscriptionStatus)
def get_subscription_status(
    creator: str,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    subscribed = SiteService(store).is_subscribed(session.secret_handle, creator)
    return SubscriptionStatus(creator=creator, subscribed=subscribed)


@router.post("/subscriptions/{creator}", response_model=SubscriptionStatus)
def toggle_subscription(
    creator: str,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Subscribe to or unsubscribe from a creator."""
    try:
        subscribed = SiteService(store).toggle_subscription(session.secret_handle, creator)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return SubscriptionStatus(creator=creator, subscribed=subscribed)


@router.get("/event", response_model=Optional[SiteEvent])
def get_active_event(store: RecordStore = Depends(get_store)):
    """Get the running site event, if any."""
    return SiteService(store).active_event()


@router.post("/event", response_model=SiteEvent, status_code=status.HTTP_201_CREATED)
def start_event(
    request: EventStartRequest,
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Start a site-wide theme event."""
    try:
        return SiteService(store).start_event(request.theme, request.name)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.delete("/event", status_code=status.HTTP_204_NO_CONTENT)
def stop_event(
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Stop the running site event."""
    try:
        stopped = SiteService(store).stop_event()
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    if not stopped:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active site event")
