"""Pydantic schemas for identity endpoints."""

from pydantic import BaseModel, Field

from streamora.modules.identity.models import Session, UserSummary


class RegisterRequest(BaseModel):
    """Request schema for creator registration."""

    public_name: str = Field(..., min_length=1)
    secret_handle: str = Field(..., min_length=1)
    password: str


class LoginRequest(BaseModel):
    """Request schema for sign in."""

    secret_handle: str
    password: str


class SessionResponse(Session):
    """Response schema for the current session."""
    pass


class TokenResponse(Session):
    """Response schema for a new session and its bearer token."""

    access_token: str
    token_type: str = "bearer"


class UserListResponse(BaseModel):
    """Response schema for the creator directory."""

    users: list[UserSummary]
    total: int
