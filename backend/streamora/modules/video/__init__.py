"""Video module: video collection, feeds and embeds."""

from streamora.modules.video.models import Comment, EmbedSource, Video, VideoType
from streamora.modules.video.repository import VideoRepository
from streamora.modules.video.service import VideoService

__all__ = [
    "Comment",
    "EmbedSource",
    "Video",
    "VideoType",
    "VideoRepository",
    "VideoService",
]
