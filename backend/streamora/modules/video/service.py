"""Video service for publishing, feeds and viewer interactions."""

import logging
from typing import Optional

from streamora.core.exceptions import InputValidationError
from streamora.core.logging import log_info
from streamora.core.store import RecordStore
from streamora.modules.video.embed import detect_embed_source, to_embed_url
from streamora.modules.video.models import Comment, Video, VideoType
from streamora.modules.video.repository import VideoRepository
from streamora.modules.video.schemas import EmbedVideoCreate, VideoCreate

logger = logging.getLogger(__name__)

PLATFORM_UPLOADER_NAME = "Streamora"


def _clean_tags(tags: list[str]) -> list[str]:
    return [t.strip() for t in tags if t.strip()]


class VideoService:
    """Service for video records."""

    def __init__(self, store: RecordStore):
        self.video_repository = VideoRepository(store)

    def publish(self, handle: str, public_name: str, request: VideoCreate) -> Video:
        """Store metadata for an uploaded long video or short.

        Raises:
            InputValidationError: Blank title, embedded type, or a promoted
                video without a thumbnail
        """
        title = request.title.strip()
        if not title:
            raise InputValidationError("Please enter a title")
        if request.type == VideoType.EMBEDDED:
            raise InputValidationError("Embedded videos are added from a video URL")
        if request.is_promoted and not (request.thumbnail_url or "").strip():
            raise InputValidationError("A thumbnail URL is required for promoted videos")

        video = self.video_repository.save(
            Video(
                type=request.type,
                title=title,
                description=request.description.strip(),
                tags=_clean_tags(request.tags),
                thumbnail_url=(request.thumbnail_url or "").strip() or None,
                video_url=request.video_url,
                duration=request.duration,
                uploader_handle=handle,
                uploader_name=public_name,
                is_promoted=request.is_promoted,
            )
        )
        log_info(logger, "Video published", video_id=video.id, handle=handle, video_type=video.type.value)
        return video

    def embed(self, handle: str, request: EmbedVideoCreate) -> Video:
        """Add a YouTube or Rumble video as an embedded platform video.

        Raises:
            InputValidationError: Missing URL or title, unsupported host, or a
                promoted video without a thumbnail
        """
        url = request.url.strip()
        title = request.title.strip()
        if not url:
            raise InputValidationError("Please enter a video URL")
        if not title:
            raise InputValidationError("Please enter a title")

        source = detect_embed_source(url)
        if source is None:
            raise InputValidationError("URL must be a YouTube or Rumble link")

        thumbnail_url = (request.thumbnail_url or "").strip() or None
        if request.is_promoted and not thumbnail_url:
            raise InputValidationError("A thumbnail URL is required for promoted videos")

        video = self.video_repository.save(
            Video(
                type=VideoType.EMBEDDED,
                title=title,
                description=request.description.strip(),
                tags=_clean_tags(request.tags),
                thumbnail_url=thumbnail_url,
                embed_url=to_embed_url(url, source),
                embed_source=source,
                uploader_handle=handle,
                uploader_name=PLATFORM_UPLOADER_NAME,
                is_promoted=request.is_promoted,
            )
        )
        log_info(logger, "Video embedded", video_id=video.id, embed_source=source.value)
        return video

    def get_video(self, video_id: str) -> Optional[Video]:
        return self.video_repository.get_by_id(video_id)

    def delete_video(self, video_id: str) -> bool:
        deleted = self.video_repository.delete_by_id(video_id)
        if deleted:
            log_info(logger, "Video deleted", video_id=video_id)
        return deleted

    def list_by_uploader(self, handle: str) -> list[Video]:
        return self.video_repository.list_by_uploader(handle)

    def home_feed(self) -> list[Video]:
        return self.video_repository.home_feed()

    def shorts_feed(self) -> list[Video]:
        return self.video_repository.shorts_feed()

    def search(self, query: str) -> list[Video]:
        return self.video_repository.search(query)

    def record_view(self, video_id: str) -> Optional[Video]:
        return self.video_repository.increment_views(video_id)

    def like(self, video_id: str) -> Optional[Video]:
        return self.video_repository.add_like(video_id)

    def comment(
        self,
        video_id: str,
        handle: str,
        public_name: str,
        text: str,
    ) -> Optional[Video]:
        """Add a comment to a video.

        Returns:
            Optional[Video]: Updated video, None if the video does not exist

        Raises:
            InputValidationError: Blank comment
        """
        text = (text or "").strip()
        if not text:
            raise InputValidationError("Comment cannot be empty")
        return self.video_repository.add_comment(
            video_id, Comment(handle=handle, public_name=public_name, text=text)
        )
