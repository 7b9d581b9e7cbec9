"""Repository for registered user records."""

from typing import Optional

from streamora.core.store import USERS_KEY, RecordStore, parse_records
from streamora.modules.identity.models import UserIdentity


class UserRepository:
    """Repository for the user directory collection."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> list[UserIdentity]:
        """Get every registered user in registration order."""
        return parse_records(UserIdentity, self.store.list_records(USERS_KEY), USERS_KEY)

    def get_by_handle(self, handle: str) -> Optional[UserIdentity]:
        """Get user by handle, ignoring case."""
        for user in self.get_all():
            if user.matches_handle(handle):
                return user
        return None

    def create(self, user: UserIdentity) -> UserIdentity:
        """Append a user to the directory."""
        self.store.insert(USERS_KEY, user.model_dump(mode="json"), prepend=False)
        return user
