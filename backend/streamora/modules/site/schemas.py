"""Pydantic schemas for site endpoints."""

from typing import Optional

from pydantic import BaseModel

from streamora.modules.site.models import SiteTheme


class EventStartRequest(BaseModel):
    theme: SiteTheme
    name: Optional[str] = None


class SubscriptionStatus(BaseModel):
    creator: str
    subscribed: bool


class SubscriptionListResponse(BaseModel):
    creators: list[str]
    total: int
