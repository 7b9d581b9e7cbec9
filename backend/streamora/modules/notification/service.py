"""Notification dispatcher.

Fans system messages out to one creator or, through the broadcast target,
to every creator. Inboxes are computed by filtering the full collection on
every read.
"""

import logging
from typing import Optional, Union

from streamora.core.exceptions import InputValidationError
from streamora.core.logging import log_info
from streamora.core.store import RecordStore
from streamora.modules.notification.models import (
    BROADCAST_TARGET,
    Notification,
    NotificationCategory,
)
from streamora.modules.notification.repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for sending and reading inbox notifications."""

    def __init__(self, store: RecordStore):
        self.repository = NotificationRepository(store)

    def send(
        self,
        target_handle: str,
        category: Union[NotificationCategory, str],
        message: str,
    ) -> Notification:
        """Send a notification to a handle or to everyone.

        Args:
            target_handle: Recipient handle or BROADCAST_TARGET
            category: Notification category
            message: Message text, surrounding whitespace is dropped

        Returns:
            Notification: The stored notification

        Raises:
            InputValidationError: Empty target, unknown category or blank message
        """
        target_handle = (target_handle or "").strip()
        if not target_handle:
            raise InputValidationError("Notification target is required")

        try:
            category = NotificationCategory(category)
        except ValueError:
            raise InputValidationError(f"Unknown notification category: {category}")

        message = (message or "").strip()
        if not message:
            raise InputValidationError("Please enter a message")

        notification = self.repository.create(
            Notification(
                target_handle=target_handle,
                category=category,
                message=message,
            )
        )
        log_info(
            logger,
            "Notification sent",
            notification_id=notification.id,
            target_handle=target_handle,
            category=category.value,
        )
        return notification

    def broadcast(
        self,
        category: Union[NotificationCategory, str],
        message: str,
    ) -> Notification:
        """Send a single notification visible in every inbox."""
        return self.send(BROADCAST_TARGET, category, message)

    def inbox(self, handle: str) -> list[Notification]:
        """Get notifications for handle, most recent first."""
        return self.repository.get_for_handle(handle)

    def unread_count(self, handle: str) -> int:
        return sum(1 for n in self.inbox(handle) if not n.read)

    def mark_read(self, notification_id: str) -> Optional[Notification]:
        """Mark a notification as read.

        A broadcast is a single record, so this marks it read for every
        reader.

        Returns:
            Optional[Notification]: Updated notification, None if not found
        """
        notification = self.repository.mark_read(notification_id)
        if notification:
            log_info(logger, "Notification marked read", notification_id=notification_id)
        return notification

    def list_all(self) -> list[Notification]:
        return self.repository.get_all()
