"""Repository for the per-creator stats map."""

import logging

from pydantic import ValidationError

from streamora.core.logging import log_warning
from streamora.core.store import USER_STATS_KEY, RecordStore
from streamora.modules.creator.models import CreatorStats

logger = logging.getLogger(__name__)


class CreatorStatsRepository:
    """Repository for CreatorStats, keyed by handle."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get(self, handle: str) -> CreatorStats:
        """Get stats for handle, or the defaults when none are stored."""
        record = self.store.get_entry(USER_STATS_KEY, handle)
        if record is None:
            return CreatorStats.default_for(handle)
        try:
            return CreatorStats.model_validate(record)
        except ValidationError as e:
            log_warning(logger, "Malformed stats record, using defaults", handle=handle, error=str(e))
            return CreatorStats.default_for(handle)

    def save(self, stats: CreatorStats) -> CreatorStats:
        """Replace the stored stats for stats.handle."""
        self.store.put_entry(USER_STATS_KEY, stats.handle, stats.model_dump(mode="json"))
        return stats

    def update(self, handle: str, **changes) -> CreatorStats:
        """Read, apply and validate changes, then save."""
        current = self.get(handle).model_dump()
        current.update(changes)
        return self.save(CreatorStats.model_validate(current))

    def get_all(self) -> dict[str, CreatorStats]:
        """Get every stored stats record."""
        result = {}
        for handle, record in self.store.entries(USER_STATS_KEY).items():
            try:
                result[handle] = CreatorStats.model_validate(record)
            except ValidationError as e:
                log_warning(logger, "Skipping malformed stats record", handle=handle, error=str(e))
        return result
