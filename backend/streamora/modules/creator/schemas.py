"""Pydantic schemas for creator stats endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from streamora.modules.creator.models import CreatorStats


class CreatorStatsResponse(CreatorStats):
    """Response schema for creator stats.

    The Ad PIN is never echoed back.
    """

    ad_pin: Optional[str] = Field(default=None, exclude=True)


class CreatorStatsUpdate(BaseModel):
    """Admin stats editor request. Only the given fields are changed."""

    public_name: Optional[str] = None
    total_views: Optional[int] = Field(default=None, ge=0)
    subscriber_count: Optional[int] = Field(default=None, ge=0)
    estimated_earnings: Optional[float] = Field(default=None, ge=0)
    total_earnings: Optional[float] = Field(default=None, ge=0)
    ad_eligible: Optional[bool] = None
