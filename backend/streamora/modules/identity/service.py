"""Identity directory service.

Registers creators, signs them in and keeps the current session in process
memory for direct callers. The HTTP API does not use that session; it issues
a bearer token per sign-in (see `jwt.py`). The privileged account is not
stored in the directory; its handle is reserved and its password comes from
configuration.
"""

import hmac
import logging
from typing import Optional

from streamora.core.config import settings
from streamora.core.exceptions import InputValidationError, PreconditionNotMetError
from streamora.core.logging import log_info, log_warning
from streamora.core.store import RecordStore
from streamora.modules.identity.models import (
    Session,
    UserIdentity,
    UserSummary,
    hash_credential,
    validate_registration,
    verify_credential,
)
from streamora.modules.identity.repository import UserRepository

logger = logging.getLogger(__name__)

ADMIN_PUBLIC_NAME = "Admin"


class HandleUnavailableError(PreconditionNotMetError):
    """Exception raised when a handle is reserved or already taken."""
    pass


class SessionState:
    """Holder for the in-process session. Never persisted or shared over HTTP."""

    def __init__(self):
        self.current: Optional[Session] = None


class IdentityDirectory:
    """Service for registration, login and session lookup."""

    def __init__(
        self,
        store: RecordStore,
        session_state: Optional[SessionState] = None,
        admin_handle: Optional[str] = None,
        admin_password: Optional[str] = None,
    ):
        self.user_repository = UserRepository(store)
        self.session_state = session_state or SessionState()
        self.admin_handle = admin_handle or settings.ADMIN_HANDLE
        self.admin_password = (
            admin_password if admin_password is not None else settings.ADMIN_PASSWORD
        )

    def is_reserved_handle(self, handle: str) -> bool:
        return handle.strip().lower() == self.admin_handle.lower()

    def register(self, public_name: str, secret_handle: str, password: str) -> Session:
        """Register a creator and sign them in.

        Args:
            public_name: Display name
            secret_handle: Private identity key, unique ignoring case
            password: Plain text password

        Returns:
            Session: Session for the new creator

        Raises:
            InputValidationError: Missing or too short fields
            HandleUnavailableError: Reserved or taken handle
        """
        violations = validate_registration(public_name, secret_handle, password)
        if violations:
            raise InputValidationError("; ".join(violations))

        public_name = public_name.strip()
        secret_handle = secret_handle.strip()

        if self.is_reserved_handle(secret_handle):
            raise HandleUnavailableError("Username not available")
        if self.user_repository.get_by_handle(secret_handle):
            raise HandleUnavailableError("Username already taken")

        user = self.user_repository.create(
            UserIdentity(
                public_name=public_name,
                secret_handle=secret_handle,
                credential_proof=hash_credential(password),
            )
        )
        log_info(logger, "Creator registered", handle=user.secret_handle)

        return self._start_session(
            Session(secret_handle=user.secret_handle, public_name=user.public_name)
        )

    def login(self, secret_handle: str, password: str) -> Optional[Session]:
        """Sign in with handle and password.

        Returns:
            Optional[Session]: Session if credentials match, None otherwise
        """
        secret_handle = (secret_handle or "").strip()

        if secret_handle == self.admin_handle:
            if self.admin_password and hmac.compare_digest(
                password.encode("utf-8"), self.admin_password.encode("utf-8")
            ):
                return self._start_session(
                    Session(
                        secret_handle=self.admin_handle,
                        public_name=ADMIN_PUBLIC_NAME,
                        is_privileged=True,
                    )
                )
            log_warning(logger, "Admin login rejected")
            return None

        user = self.user_repository.get_by_handle(secret_handle)
        if user is None or not verify_credential(password, user.credential_proof):
            log_warning(logger, "Login rejected", handle=secret_handle)
            return None

        return self._start_session(
            Session(
                secret_handle=user.secret_handle,
                public_name=user.public_name,
                is_privileged=user.is_privileged,
            )
        )

    def logout(self) -> None:
        self.session_state.current = None

    def resolve_session(self) -> Optional[Session]:
        """Get the current session, if any."""
        return self.session_state.current

    def list_all_identities(self) -> list[UserSummary]:
        """List registered creators. The privileged account is not included."""
        return [
            UserSummary(secret_handle=u.secret_handle, public_name=u.public_name)
            for u in self.user_repository.get_all()
        ]

    def get_identity(self, secret_handle: str) -> Optional[UserSummary]:
        user = self.user_repository.get_by_handle(secret_handle)
        if user is None:
            return None
        return UserSummary(secret_handle=user.secret_handle, public_name=user.public_name)

    def _start_session(self, session: Session) -> Session:
        self.session_state.current = session
        log_info(
            logger,
            "Session started",
            handle=session.secret_handle,
            is_privileged=session.is_privileged,
        )
        return session
