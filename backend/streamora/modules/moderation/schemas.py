"""Pydantic schemas for moderation endpoints."""

from pydantic import BaseModel, Field


class StrikeRequest(BaseModel):
    """Request schema for issuing a strike."""

    new_count: int = Field(..., description="Strike level to raise the creator to, 1 to 3")


class ClearStrikesResponse(BaseModel):
    handle: str
    previous_count: int
    strikes: int = 0
