"""Property-based tests for the identity directory.

Handles are unique ignoring case, the admin handle is reserved, and only
matching credentials start a session.
"""

import string

import pytest
from hypothesis import given, settings, strategies as st

from streamora.core.exceptions import InputValidationError
from streamora.core.store import RecordStore
from streamora.modules.identity.models import validate_registration
from streamora.modules.identity.service import HandleUnavailableError, IdentityDirectory

ADMIN_HANDLE = "SHUBOWNER2026"
ADMIN_PASSWORD = "owner-secret"


def make_directory(store: RecordStore = None, admin_password: str = ADMIN_PASSWORD) -> IdentityDirectory:
    return IdentityDirectory(
        store or RecordStore.in_memory(),
        admin_handle=ADMIN_HANDLE,
        admin_password=admin_password,
    )


def case_variant(value: str, flips: list[bool]) -> str:
    return "".join(
        c.swapcase() if flip else c
        for c, flip in zip(value, flips + [False] * len(value))
    )


short_handle_strategy = st.text(alphabet=string.ascii_letters, min_size=1, max_size=2)
short_password_strategy = st.text(alphabet=string.ascii_letters, max_size=5)


class TestRegistrationValidation:
    """Property tests for registration field checks."""

    @given(handle=short_handle_strategy)
    @settings(max_examples=30)
    def test_short_handle_rejected(self, handle: str) -> None:
        """*For any* handle under 3 characters, registration SHALL fail validation."""
        directory = make_directory()

        with pytest.raises(InputValidationError):
            directory.register("Someone", handle, "password1")

        assert directory.list_all_identities() == []

    @given(password=short_password_strategy)
    @settings(max_examples=30)
    def test_short_password_reported(self, password: str) -> None:
        """*For any* password under 6 characters, a violation SHALL be reported."""
        violations = validate_registration("Someone", "someone", password)
        assert any("Password" in v for v in violations)

    @given(flips=st.lists(st.booleans(), max_size=len(ADMIN_HANDLE)))
    @settings(max_examples=30)
    def test_admin_handle_reserved_in_any_case(self, flips: list[bool]) -> None:
        """*For any* casing of the admin handle, registration SHALL be refused."""
        directory = make_directory()

        with pytest.raises(HandleUnavailableError):
            directory.register("Impostor", case_variant(ADMIN_HANDLE, flips), "password1")

        assert directory.resolve_session() is None


class TestRegistrationAndLogin:
    """Tests for the register/login lifecycle."""

    def test_register_starts_session_and_lists_identity(self) -> None:
        directory = make_directory()

        session = directory.register("Alice", "alice", "wonderland")

        assert session.secret_handle == "alice"
        assert session.public_name == "Alice"
        assert not session.is_privileged
        assert directory.resolve_session() == session
        assert [u.secret_handle for u in directory.list_all_identities()] == ["alice"]

    def test_duplicate_handle_rejected_ignoring_case(self) -> None:
        store = RecordStore.in_memory()
        make_directory(store).register("Alice", "alice", "wonderland")

        with pytest.raises(HandleUnavailableError):
            make_directory(store).register("Other Alice", "ALICE", "different")

        assert len(make_directory(store).list_all_identities()) == 1

    def test_login_checks_credentials(self) -> None:
        store = RecordStore.in_memory()
        make_directory(store).register("Bob", "bob", "builder1")

        directory = make_directory(store)
        assert directory.login("bob", "wrong-pass") is None
        assert directory.resolve_session() is None

        session = directory.login("bob", "builder1")
        assert session is not None
        assert session.secret_handle == "bob"

        directory.logout()
        assert directory.resolve_session() is None

    def test_password_is_not_stored_in_plain_text(self) -> None:
        store = RecordStore.in_memory()
        make_directory(store).register("Carol", "carol", "s3cret-pass")

        stored = store.find_by_field("users", "secret_handle", "carol")
        assert "s3cret-pass" not in stored["credential_proof"]

    def test_admin_login(self) -> None:
        directory = make_directory()

        assert directory.login(ADMIN_HANDLE, "guess") is None

        session = directory.login(ADMIN_HANDLE, ADMIN_PASSWORD)
        assert session.is_privileged
        assert directory.list_all_identities() == []

    def test_admin_login_disabled_without_password(self) -> None:
        directory = make_directory(admin_password="")
        assert directory.login(ADMIN_HANDLE, "") is None

    def test_unknown_handle_login_fails(self) -> None:
        assert make_directory().login("nobody", "whatever") is None
        assert make_directory().get_identity("nobody") is None
