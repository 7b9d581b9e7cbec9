"""Creator module: the per-creator stats record."""

from streamora.modules.creator.models import (
    MAX_STRIKES,
    CpmRank,
    CreatorStats,
    MonetizationPlan,
)
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.creator.service import CreatorStatsService

__all__ = [
    "MAX_STRIKES",
    "CpmRank",
    "CreatorStats",
    "MonetizationPlan",
    "CreatorStatsRepository",
    "CreatorStatsService",
]
