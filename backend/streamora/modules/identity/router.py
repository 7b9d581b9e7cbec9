"""API router for registration, sign in and the creator directory."""

from fastapi import APIRouter, Depends, HTTPException, status

from streamora.core.exceptions import InputValidationError, StorageError
from streamora.modules.identity.dependencies import (
    get_bearer_token,
    get_identity_directory,
    require_admin,
    require_session,
)
from streamora.modules.identity.jwt import create_access_token, revoke_token
from streamora.modules.identity.models import Session
from streamora.modules.identity.schemas import (
    LoginRequest,
    RegisterRequest,
    SessionResponse,
    TokenResponse,
    UserListResponse,
)
from streamora.modules.identity.service import HandleUnavailableError, IdentityDirectory

router = APIRouter(prefix="/identity", tags=["identity"])


def _token_response(session: Session) -> TokenResponse:
    return TokenResponse(**session.model_dump(), access_token=create_access_token(session))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    directory: IdentityDirectory = Depends(get_identity_directory),
):
    """Register a creator and issue their session token."""
    try:
        session = directory.register(
            request.public_name, request.secret_handle, request.password
        )
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except HandleUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return _token_response(session)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    directory: IdentityDirectory = Depends(get_identity_directory),
):
    """Sign in with handle and password."""
    session = directory.login(request.secret_handle, request.password)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return _token_response(session)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(token: str = Depends(get_bearer_token)):
    """Revoke the caller's token."""
    if not revoke_token(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/session", response_model=SessionResponse)
def get_session(session: Session = Depends(require_session)):
    """Get the signed-in identity."""
    return SessionResponse.model_validate(session.model_dump())


@router.get("/users", response_model=UserListResponse)
def list_users(
    _: Session = Depends(require_admin),
    directory: IdentityDirectory = Depends(get_identity_directory),
):
    """List registered creators."""
    users = directory.list_all_identities()
    return UserListResponse(users=users, total=len(users))
