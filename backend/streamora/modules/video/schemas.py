"""Pydantic schemas for video endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from streamora.modules.video.models import Video, VideoType


class VideoCreate(BaseModel):
    """Request schema for publishing an uploaded video."""

    type: VideoType = VideoType.LONG
    title: str = Field(..., max_length=200)
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[float] = Field(default=None, ge=0)
    is_promoted: bool = False


class EmbedVideoCreate(BaseModel):
    """Request schema for embedding a YouTube or Rumble video."""

    url: str
    title: str = Field(..., max_length=200)
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    is_promoted: bool = True


class CommentCreate(BaseModel):
    """Request schema for a comment."""

    text: str = Field(..., max_length=2000)


class VideoResponse(Video):
    """Response schema for a video."""
    pass


class VideoListResponse(BaseModel):
    """Response schema for a list of videos."""

    videos: list[VideoResponse]
    total: int
