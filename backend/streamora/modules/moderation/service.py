"""Moderation engine.

Escalating strikes: 1 is a warning that home-feed promotion is withdrawn, 2
disables monetization, 3 suspends the channel and deletes every video the
creator owns. Strikes only go up; an admin clear is the one way back down.
"""

import logging

from streamora.core.exceptions import (
    InputValidationError,
    PreconditionNotMetError,
    StorageError,
)
from streamora.core.logging import log_error, log_info
from streamora.core.store import RecordStore
from streamora.modules.creator.models import MAX_STRIKES
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.moderation.models import STRIKE_MESSAGES, StrikeOutcome, StrikeSummary
from streamora.modules.notification.models import NotificationCategory
from streamora.modules.notification.service import NotificationService
from streamora.modules.video.repository import VideoRepository

logger = logging.getLogger(__name__)

DEMONETIZE_AT = 2
SUSPEND_AT = MAX_STRIKES


class ModerationService:
    """Service for issuing and clearing strikes."""

    def __init__(self, store: RecordStore):
        self.stats_repository = CreatorStatsRepository(store)
        self.video_repository = VideoRepository(store)
        self.notifications = NotificationService(store)

    def issue_strike(self, handle: str, new_count: int) -> StrikeOutcome:
        """Raise a creator's strike count to new_count and apply its effects.

        Levels may be skipped; the effects of new_count apply in full.

        Args:
            handle: Creator handle
            new_count: Strike level, 1 to 3

        Returns:
            StrikeOutcome: Counts, deleted videos and the notice sent

        Raises:
            InputValidationError: new_count outside 1..3
            PreconditionNotMetError: new_count is not above the current count
        """
        if not 1 <= new_count <= MAX_STRIKES:
            raise InputValidationError(f"Strike level must be between 1 and {MAX_STRIKES}")

        stats = self.stats_repository.get(handle)
        previous = stats.strikes
        if new_count <= previous:
            raise PreconditionNotMetError(f"Creator already has {previous} strike(s)")

        changes = {"strikes": new_count}
        demonetize = new_count >= DEMONETIZE_AT
        if demonetize:
            changes["is_monetized"] = False

        # Flags go in before the purge so an interrupted purge stays demonetized
        self.stats_repository.update(handle, **changes)

        deleted_ids = []
        if new_count >= SUSPEND_AT:
            deleted_ids = self._purge_videos(handle)

        notification = self.notifications.send(
            handle, NotificationCategory.STRIKE, STRIKE_MESSAGES[new_count]
        )

        log_info(
            logger,
            "Strike issued",
            handle=handle,
            previous_count=previous,
            new_count=new_count,
            deleted_videos=len(deleted_ids),
        )
        return StrikeOutcome(
            handle=handle,
            previous_count=previous,
            new_count=new_count,
            demonetized=demonetize,
            deleted_video_ids=deleted_ids,
            notification=notification,
        )

    def _purge_videos(self, handle: str) -> list[str]:
        """Delete every video owned by handle, one at a time."""
        video_ids = [v.id for v in self.video_repository.list_by_uploader(handle)]
        deleted = []
        for video_id in video_ids:
            try:
                if self.video_repository.delete_by_id(video_id):
                    deleted.append(video_id)
            except StorageError as e:
                log_error(
                    logger,
                    "Channel purge interrupted",
                    handle=handle,
                    deleted=len(deleted),
                    remaining=len(video_ids) - len(deleted),
                    error=str(e),
                )
                raise
        return deleted

    def clear_strikes(self, handle: str) -> int:
        """Reset the strike count to zero.

        Monetization, promotion and deleted content are not restored.

        Returns:
            int: Strike count before clearing
        """
        previous = self.stats_repository.get(handle).strikes
        self.stats_repository.update(handle, strikes=0)
        log_info(logger, "Strikes cleared", handle=handle, previous_count=previous)
        return previous

    def strike_summary(self, handle: str) -> StrikeSummary:
        stats = self.stats_repository.get(handle)
        return StrikeSummary(
            handle=handle,
            strikes=stats.strikes,
            is_monetized=stats.is_monetized,
            is_suspended=stats.is_suspended(),
            video_count=len(self.video_repository.list_by_uploader(handle)),
        )
