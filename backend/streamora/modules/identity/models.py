"""Identity models for the creator directory.

Credentials are stored as bcrypt hashes. The handle is the private identity
key used by every per-creator record; the public name is only displayed.
"""

from datetime import datetime, timezone

from passlib.context import CryptContext
from pydantic import BaseModel, Field

from streamora.core.config import settings

# Password hashing context with bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)

MIN_HANDLE_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def hash_credential(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        str: Hashed password
    """
    return pwd_context.hash(password)


def verify_credential(plain_password: str, credential_proof: str) -> bool:
    """Verify a password against its stored hash."""
    return pwd_context.verify(plain_password, credential_proof)


def validate_registration(public_name: str, handle: str, password: str) -> list[str]:
    """Validate registration fields.

    Returns:
        list[str]: List of violations (empty if valid)
    """
    violations = []

    if not public_name.strip():
        violations.append("Name is required")

    if not handle.strip():
        violations.append("Username is required")
    elif len(handle.strip()) < MIN_HANDLE_LENGTH:
        violations.append(f"Username must be at least {MIN_HANDLE_LENGTH} characters")

    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    return violations


class UserIdentity(BaseModel):
    """Registered user record."""

    public_name: str
    secret_handle: str
    credential_proof: str
    is_privileged: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def matches_handle(self, handle: str) -> bool:
        return self.secret_handle.lower() == handle.lower()


class Session(BaseModel):
    """Signed-in identity."""

    secret_handle: str
    public_name: str
    is_privileged: bool = False


class UserSummary(BaseModel):
    """Directory listing entry."""

    secret_handle: str
    public_name: str
