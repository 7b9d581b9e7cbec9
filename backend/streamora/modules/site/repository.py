"""Repositories for the site event and subscriptions."""

import logging
from typing import Optional

from pydantic import ValidationError

from streamora.core.logging import log_warning
from streamora.core.store import SITE_EVENT_KEY, SUBSCRIPTIONS_KEY, RecordStore
from streamora.modules.site.models import SiteEvent

logger = logging.getLogger(__name__)


class SiteEventRepository:
    """Repository for the single site event document."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get(self) -> Optional[SiteEvent]:
        record = self.store.read(SITE_EVENT_KEY)
        if not record:
            return None
        try:
            return SiteEvent.model_validate(record)
        except ValidationError as e:
            log_warning(logger, "Malformed site event, ignoring", error=str(e))
            return None

    def save(self, event: SiteEvent) -> SiteEvent:
        self.store.write(SITE_EVENT_KEY, event.model_dump(mode="json"))
        return event

    def clear(self) -> None:
        self.store.remove(SITE_EVENT_KEY)


class SubscriptionRepository:
    """Repository for subscriber -> creator handles."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_for(self, subscriber: str) -> list[str]:
        creators = self.store.get_entry(SUBSCRIPTIONS_KEY, subscriber)
        if not isinstance(creators, list):
            return []
        return [c for c in creators if isinstance(c, str)]

    def set_for(self, subscriber: str, creators: list[str]) -> None:
        self.store.put_entry(SUBSCRIPTIONS_KEY, subscriber, creators)
