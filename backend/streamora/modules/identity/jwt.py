"""Session token management for the HTTP API.

Each signed-in client carries its own bearer token; the server keeps no
per-client session.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from streamora.core.config import settings
from streamora.modules.identity.models import Session


class TokenPayload(BaseModel):
    """Session token payload structure."""

    sub: str  # secret handle
    name: str
    privileged: bool = False
    exp: datetime
    iat: datetime
    jti: str


class TokenBlacklist:
    """In-memory blacklist of signed-out token IDs."""

    _blacklisted_tokens: set[str] = set()

    @classmethod
    def add(cls, jti: str) -> None:
        cls._blacklisted_tokens.add(jti)

    @classmethod
    def is_blacklisted(cls, jti: str) -> bool:
        return jti in cls._blacklisted_tokens

    @classmethod
    def clear(cls) -> None:
        """Clear all blacklisted tokens (for testing)."""
        cls._blacklisted_tokens.clear()


def create_access_token(session: Session, expires_delta: Optional[timedelta] = None) -> str:
    """Encode a session into a signed bearer token.

    Args:
        session: Signed-in identity
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: Encoded token
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    payload = {
        "sub": session.secret_handle,
        "name": session.public_name,
        "privileged": session.is_privileged,
        "exp": expire,
        "iat": now,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[TokenPayload]:
    """Decode and validate a token.

    Returns:
        Optional[TokenPayload]: Payload if the token is valid, unexpired and
            not signed out
    """
    try:
        raw = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        payload = TokenPayload.model_validate(raw)
    except (JWTError, ValidationError):
        return None

    if TokenBlacklist.is_blacklisted(payload.jti):
        return None
    return payload


def session_from_token(token: str) -> Optional[Session]:
    payload = decode_token(token)
    if payload is None:
        return None
    return Session(
        secret_handle=payload.sub,
        public_name=payload.name,
        is_privileged=payload.privileged,
    )


def revoke_token(token: str) -> bool:
    """Blacklist a token so it can no longer be used.

    Returns:
        bool: False if the token was already invalid
    """
    payload = decode_token(token)
    if payload is None:
        return False
    TokenBlacklist.add(payload.jti)
    return True
