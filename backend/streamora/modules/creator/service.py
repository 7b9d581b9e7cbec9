"""Creator stats service: reads and the admin stats editor."""

import logging

from pydantic import ValidationError

from streamora.core.exceptions import InputValidationError
from streamora.core.logging import log_info
from streamora.core.store import RecordStore
from streamora.modules.creator.models import CreatorStats
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.creator.schemas import CreatorStatsUpdate

logger = logging.getLogger(__name__)


class CreatorStatsService:
    """Service for reading and editing creator stats."""

    def __init__(self, store: RecordStore):
        self.stats_repository = CreatorStatsRepository(store)

    def get_stats(self, handle: str) -> CreatorStats:
        """Get stats for handle. Unknown handles get the defaults."""
        return self.stats_repository.get(handle)

    def list_stats(self) -> dict[str, CreatorStats]:
        return self.stats_repository.get_all()

    def update_stats(self, handle: str, update: CreatorStatsUpdate) -> CreatorStats:
        """Overwrite audience and earnings figures for a creator.

        Args:
            handle: Creator handle
            update: Fields to change; unset fields are left alone

        Returns:
            CreatorStats: Saved stats

        Raises:
            InputValidationError: If the merged record is invalid
        """
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        try:
            stats = self.stats_repository.update(handle, **changes)
        except ValidationError as e:
            raise InputValidationError(str(e))

        log_info(logger, "Creator stats updated", handle=handle, fields=sorted(changes))
        return stats
