"""Notification module for creator inbox messages."""

from streamora.modules.notification.models import (
    BROADCAST_TARGET,
    Notification,
    NotificationCategory,
)
from streamora.modules.notification.service import NotificationService

__all__ = [
    "BROADCAST_TARGET",
    "Notification",
    "NotificationCategory",
    "NotificationService",
]
