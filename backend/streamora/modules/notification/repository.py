"""Repository for notification records."""

from typing import Optional

from streamora.core.store import NOTIFICATIONS_KEY, RecordStore, parse_records
from streamora.modules.notification.models import Notification


class NotificationRepository:
    """Repository for the notification collection (most recent first)."""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, notification: Notification) -> Notification:
        """Prepend a notification to the collection."""
        self.store.insert(NOTIFICATIONS_KEY, notification.model_dump(mode="json"))
        return notification

    def get_all(self) -> list[Notification]:
        """Get every stored notification."""
        return parse_records(
            Notification, self.store.list_records(NOTIFICATIONS_KEY), NOTIFICATIONS_KEY
        )

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        """Get notification by ID."""
        record = self.store.find_by_field(NOTIFICATIONS_KEY, "id", notification_id)
        return Notification.model_validate(record) if record else None

    def get_for_handle(self, handle: str) -> list[Notification]:
        """Get direct and broadcast notifications visible to handle."""
        return [n for n in self.get_all() if n.is_visible_to(handle)]

    def mark_read(self, notification_id: str) -> Optional[Notification]:
        """Set the read flag on a single stored record."""
        record = self.store.update_by_field(
            NOTIFICATIONS_KEY, "id", notification_id, {"read": True}
        )
        return Notification.model_validate(record) if record else None
