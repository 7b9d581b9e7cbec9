"""Pydantic schemas for notification endpoints."""

from pydantic import BaseModel, Field

from streamora.modules.notification.models import (
    BROADCAST_TARGET,
    Notification,
    NotificationCategory,
)


class NotificationSendRequest(BaseModel):
    """Request schema for sending a notification."""

    target_handle: str = BROADCAST_TARGET
    category: NotificationCategory = NotificationCategory.GENERAL
    message: str = Field(..., max_length=2000)


class NotificationResponse(Notification):
    """Response schema for a notification."""
    pass


class InboxResponse(BaseModel):
    """Response schema for an inbox listing."""

    notifications: list[NotificationResponse]
    total: int
    unread_count: int
