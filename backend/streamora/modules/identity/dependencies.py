"""FastAPI dependencies for session and role checks.

Every request is authenticated from its own bearer token.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from streamora.core.store import RecordStore, get_store
from streamora.modules.identity.jwt import session_from_token
from streamora.modules.identity.models import Session
from streamora.modules.identity.service import IdentityDirectory

security = HTTPBearer(auto_error=False)


def get_identity_directory(store: RecordStore = Depends(get_store)) -> IdentityDirectory:
    return IdentityDirectory(store)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Get the raw bearer token or reject the request.

    Raises:
        HTTPException: If no bearer token was sent
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def require_session(token: str = Depends(get_bearer_token)) -> Session:
    """Get the caller's session from their token.

    Raises:
        HTTPException: If the token is invalid, expired or signed out
    """
    session = session_from_token(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def require_admin(session: Session = Depends(require_session)) -> Session:
    """Verify that the caller is the admin.

    Raises:
        HTTPException: If the caller is not privileged
    """
    if not session.is_privileged:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access denied",
        )
    return session


def resolve_creator_handle(
    handle: str,
    directory: IdentityDirectory = Depends(get_identity_directory),
) -> str:
    """Map a path handle to the registered creator's stored handle.

    Handles are unique ignoring case; per-creator records are keyed by the
    stored form.

    Raises:
        HTTPException: If no creator has that handle
    """
    identity = directory.get_identity(handle)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Creator {handle} not found",
        )
    return identity.secret_handle
