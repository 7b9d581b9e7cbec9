"""Video models.

Only the metadata record is kept here; media files are not stored.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class VideoType(str, Enum):
    """Kind of video."""
    LONG = "long"
    SHORT = "short"
    EMBEDDED = "embedded"


class EmbedSource(str, Enum):
    """External host of an embedded video."""
    YOUTUBE = "youtube"
    RUMBLE = "rumble"


class Comment(BaseModel):
    """Viewer comment on a video."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    handle: str
    public_name: str
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Video(BaseModel):
    """Video metadata record."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    type: VideoType
    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    embed_url: Optional[str] = None
    embed_source: Optional[EmbedSource] = None
    uploader_handle: str
    uploader_name: str = ""
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)
    is_promoted: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: Optional[float] = None

    def is_feed_eligible(self) -> bool:
        """Promoted videos with a thumbnail may appear on the home feed."""
        return self.is_promoted and bool(self.thumbnail_url)

    def matches_query(self, query: str) -> bool:
        q = query.lower()
        return q in self.title.lower() or any(q in tag.lower() for tag in self.tags)
