"""Site module: channel subscriptions and site-wide theme events."""

from streamora.modules.site.models import THEME_EVENT_NAMES, SiteEvent, SiteTheme
from streamora.modules.site.service import SiteService

__all__ = ["THEME_EVENT_NAMES", "SiteEvent", "SiteTheme", "SiteService"]
