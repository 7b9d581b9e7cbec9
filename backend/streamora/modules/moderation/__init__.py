"""Moderation module: escalating strikes and channel suspension."""

from streamora.modules.moderation.models import STRIKE_MESSAGES, StrikeOutcome, StrikeSummary
from streamora.modules.moderation.service import ModerationService

__all__ = ["STRIKE_MESSAGES", "StrikeOutcome", "StrikeSummary", "ModerationService"]
