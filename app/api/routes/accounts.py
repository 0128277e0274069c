"""Register, login and the token-protected profile/admin endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import require_permission
from app.core.database import get_db
from app.core.permissions import Permission
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
)
from app.services.accounts import AccountError, authenticate_user, register_user

router = APIRouter()


@router.post("/register", response_model=MessageResponse)
def register(
    db: Annotated[Session, Depends(get_db)],
    body: RegisterRequest | None = None,
) -> MessageResponse:
    """Create an account. Role defaults to Agent; no token is issued here."""
    body = body or RegisterRequest()
    try:
        register_user(db, body.email, body.password, body.role)
    except AccountError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    db: Annotated[Session, Depends(get_db)],
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    body = body or LoginRequest()
    try:
        token = authenticate_user(db, body.email, body.password)
    except AccountError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return LoginResponse(message="Login successful", token=token)


@router.get("/profile", response_model=ProfileResponse)
def profile(
    current_user: Annotated[CurrentUser, Depends(require_permission(Permission.VIEW_PROFILE))],
) -> ProfileResponse:
    return ProfileResponse(
        message="You are authorized",
        user_id=current_user.id,
        role=current_user.role,
    )


@router.get("/admin-only", response_model=MessageResponse)
def admin_only(
    _admin: Annotated[CurrentUser, Depends(require_permission(Permission.VIEW_ADMIN_AREA))],
) -> MessageResponse:
    """SuperAdmin only."""
    return MessageResponse(message="Welcome SuperAdmin")
