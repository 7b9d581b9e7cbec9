"""Repository for the video collection."""

from typing import Optional

from streamora.core.store import VIDEOS_KEY, RecordStore, parse_records
from streamora.modules.video.models import Comment, Video, VideoType

SEARCH_MIN_QUERY_LENGTH = 2
SEARCH_RESULT_LIMIT = 10


class VideoRepository:
    """Repository for Video records (newest first)."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> list[Video]:
        return parse_records(Video, self.store.list_records(VIDEOS_KEY), VIDEOS_KEY)

    def get_by_id(self, video_id: str) -> Optional[Video]:
        """Get video by ID."""
        record = self.store.find_by_field(VIDEOS_KEY, "id", video_id)
        return Video.model_validate(record) if record else None

    def save(self, video: Video) -> Video:
        """Replace the video with the same ID, or add it as the newest."""
        self.store.upsert_by_field(VIDEOS_KEY, "id", video.model_dump(mode="json"))
        return video

    def delete_by_id(self, video_id: str) -> bool:
        """Hard delete a video."""
        return self.store.delete_by_field(VIDEOS_KEY, "id", video_id) > 0

    def list_by_uploader(self, handle: str) -> list[Video]:
        """Get every video uploaded by handle."""
        return [v for v in self.get_all() if v.uploader_handle == handle]

    def count_promoted_with_thumbnail(self) -> int:
        return sum(1 for v in self.get_all() if v.is_feed_eligible())

    def home_feed(self) -> list[Video]:
        """Get long and embedded videos eligible for the home feed."""
        return [
            v for v in self.get_all()
            if v.type in (VideoType.LONG, VideoType.EMBEDDED) and v.is_feed_eligible()
        ]

    def shorts_feed(self) -> list[Video]:
        return [v for v in self.get_all() if v.type == VideoType.SHORT]

    def search(self, query: str) -> list[Video]:
        """Match query against titles and tags, case-insensitive.

        Queries shorter than SEARCH_MIN_QUERY_LENGTH return nothing.
        """
        query = query.strip()
        if len(query) < SEARCH_MIN_QUERY_LENGTH:
            return []
        matches = [v for v in self.get_all() if v.matches_query(query)]
        return matches[:SEARCH_RESULT_LIMIT]

    def increment_views(self, video_id: str) -> Optional[Video]:
        video = self.get_by_id(video_id)
        if video is None:
            return None
        video.views += 1
        return self.save(video)

    def add_like(self, video_id: str) -> Optional[Video]:
        video = self.get_by_id(video_id)
        if video is None:
            return None
        video.likes += 1
        return self.save(video)

    def add_comment(self, video_id: str, comment: Comment) -> Optional[Video]:
        """Append a comment to a video."""
        video = self.get_by_id(video_id)
        if video is None:
            return None
        video.comments.append(comment)
        return self.save(video)
