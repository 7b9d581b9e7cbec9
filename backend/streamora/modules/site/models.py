"""Site-wide theme events and channel subscriptions."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field


class SiteTheme(str, Enum):
    """Themes an admin can switch the whole site to."""
    HOLIDAY = "holiday"
    DARK_EVENT = "dark-event"
    GOLDEN = "golden"


# Default display name for each theme's event
THEME_EVENT_NAMES = MappingProxyType({
    SiteTheme.HOLIDAY: "Holiday Theme",
    SiteTheme.DARK_EVENT: "Dark Mode Event",
    SiteTheme.GOLDEN: "Golden Event",
})


class SiteEvent(BaseModel):
    """The running site event. At most one exists."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    theme: SiteTheme
    active: bool = True
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
