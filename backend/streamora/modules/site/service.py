"""Site service for channel subscriptions and theme events."""

import logging
from typing import Optional, Union

from streamora.core.exceptions import InputValidationError
from streamora.core.logging import log_info
from streamora.core.store import RecordStore
from streamora.modules.site.models import THEME_EVENT_NAMES, SiteEvent, SiteTheme
from streamora.modules.site.repository import SiteEventRepository, SubscriptionRepository

logger = logging.getLogger(__name__)


class SiteService:
    """Service for subscriptions and the site-wide event."""

    def __init__(self, store: RecordStore):
        self.subscription_repository = SubscriptionRepository(store)
        self.event_repository = SiteEventRepository(store)

    # ==================== Subscriptions ====================

    def toggle_subscription(self, subscriber: str, creator: str) -> bool:
        """Subscribe to a creator, or unsubscribe if already subscribed.

        Returns:
            bool: True if now subscribed

        Raises:
            InputValidationError: Missing handle or self-subscription
        """
        subscriber = (subscriber or "").strip()
        creator = (creator or "").strip()
        if not subscriber or not creator:
            raise InputValidationError("Subscriber and creator are required")
        if subscriber == creator:
            raise InputValidationError("You cannot subscribe to your own channel")

        creators = self.subscription_repository.get_for(subscriber)
        if creator in creators:
            creators.remove(creator)
            subscribed = False
        else:
            creators.append(creator)
            subscribed = True
        self.subscription_repository.set_for(subscriber, creators)

        log_info(
            logger,
            "Subscription toggled",
            handle=subscriber,
            creator=creator,
            subscribed=subscribed,
        )
        return subscribed

    def is_subscribed(self, subscriber: str, creator: str) -> bool:
        return creator in self.subscription_repository.get_for(subscriber)

    def subscriptions(self, subscriber: str) -> list[str]:
        return self.subscription_repository.get_for(subscriber)

    # ==================== Site event ====================

    def start_event(
        self,
        theme: Union[SiteTheme, str],
        name: Optional[str] = None,
    ) -> SiteEvent:
        """Start a site event, replacing any running one.

        Raises:
            InputValidationError: Unknown theme
        """
        try:
            theme = SiteTheme(theme)
        except ValueError:
            raise InputValidationError(f"Unknown site theme: {theme}")

        name = (name or "").strip() or THEME_EVENT_NAMES[theme]
        event = self.event_repository.save(SiteEvent(name=name, theme=theme))
        log_info(logger, "Site event started", event_id=event.id, theme=theme.value)
        return event

    def stop_event(self) -> bool:
        """Stop the running event.

        Returns:
            bool: False if no event was running
        """
        if self.event_repository.get() is None:
            return False
        self.event_repository.clear()
        log_info(logger, "Site event stopped")
        return True

    def active_event(self) -> Optional[SiteEvent]:
        return self.event_repository.get()
