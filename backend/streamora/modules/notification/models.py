"""Notification models for creator inbox messages.

A notification addressed to the broadcast target is stored once and shows
up in every inbox. Its read flag is shared by all readers.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

BROADCAST_TARGET = "ALL"


class NotificationCategory(str, Enum):
    """Inbox message categories."""
    PAYMENT = "payment"
    MONETIZATION = "monetization"
    STRIKE = "strike"
    GENERAL = "general"


class Notification(BaseModel):
    """Stored inbox message."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    target_handle: str
    category: NotificationCategory
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False

    def is_broadcast(self) -> bool:
        return self.target_handle == BROADCAST_TARGET

    def is_visible_to(self, handle: str) -> bool:
        """Check whether this notification belongs in handle's inbox."""
        return self.is_broadcast() or self.target_handle == handle
