"""API router for inbox and notification sending endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import InputValidationError, StorageError
from streamora.core.store import RecordStore, get_store
from streamora.modules.identity.dependencies import require_admin, require_session
from streamora.modules.identity.models import Session
from streamora.modules.notification.schemas import (
    InboxResponse,
    NotificationResponse,
    NotificationSendRequest,
)
from streamora.modules.notification.service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/inbox", response_model=InboxResponse)
def get_inbox(
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Get the signed-in creator's inbox, most recent first."""
    service = NotificationService(store)
    notifications = service.inbox(session.secret_handle)
    return InboxResponse(
        notifications=[NotificationResponse.model_validate(n.model_dump()) for n in notifications],
        total=len(notifications),
        unread_count=sum(1 for n in notifications if not n.read),
    )


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: str,
    _: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Mark a notification as read."""
    service = NotificationService(store)
    try:
        notification = service.mark_read(notification_id)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    if not notification:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification {notification_id} not found",
        )
    return NotificationResponse.model_validate(notification.model_dump())


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
def send_notification(
    request: NotificationSendRequest,
    _: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Send a notification to one creator or to everyone."""
    service = NotificationService(store)
    try:
        notification = service.send(request.target_handle, request.category, request.message)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return NotificationResponse.model_validate(notification.model_dump())
