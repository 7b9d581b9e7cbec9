"""Moderation models."""

from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, Field

from streamora.modules.notification.models import Notification

STRIKE_MESSAGES = MappingProxyType({
    1: "⚠️ You have received Strike 1. Your videos will no longer be promoted on the home feed.",
    2: "⚠️ You have received Strike 2. Your monetization has been disabled.",
    3: "🚫 You have received Strike 3. Your channel has been suspended and all content removed.",
})


class StrikeOutcome(BaseModel):
    """What issuing a strike did."""

    handle: str
    previous_count: int
    new_count: int
    demonetized: bool = False
    deleted_video_ids: list[str] = Field(default_factory=list)
    notification: Optional[Notification] = None


class StrikeSummary(BaseModel):
    handle: str
    strikes: int
    is_monetized: bool
    is_suspended: bool
    video_count: int
