"""Identity module: creator directory, in-process session and bearer tokens."""

from streamora.modules.identity.models import Session, UserIdentity, UserSummary
from streamora.modules.identity.service import (
    HandleUnavailableError,
    IdentityDirectory,
    SessionState,
)

__all__ = [
    "Session",
    "UserIdentity",
    "UserSummary",
    "HandleUnavailableError",
    "IdentityDirectory",
    "SessionState",
]
