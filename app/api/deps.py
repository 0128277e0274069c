"""Auth guard and request dependencies (get_current_user, require_permission)."""

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.permissions import Permission, Role, has_permission
from app.core.security import TokenRejected, verify_access_token
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

BYPASS_USER = CurrentUser(id="dev-user", role=Role.SUPER_ADMIN)


class AuthGuard:
    """
    Resolves the Authorization header of one request to a CurrentUser or a 401.

    All configuration (bypass flag, token secret) is fixed at construction, so a
    check depends only on the header value and these settings.
    """

    def __init__(self, config: Settings) -> None:
        self.config = config
        self.bypass = config.BYPASS_AUTH

    def authenticate(self, authorization: str | None) -> CurrentUser:
        if self.bypass:
            return BYPASS_USER

        if not authorization:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token missing",
                headers={"WWW-Authenticate": "Bearer"},
            )

        # "Bearer <token>"; the scheme word itself is not checked.
        parts = authorization.split()
        token = parts[1] if len(parts) > 1 else ""

        result = verify_access_token(token, self.config)
        if isinstance(result, TokenRejected):
            logger.debug("Rejected bearer token: %s", result.reason)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return CurrentUser(id=result.subject_id, role=result.role)


def get_auth_guard() -> AuthGuard:
    """Dependency: guard built from process settings (override in tests)."""
    return AuthGuard(get_settings())


def get_current_user(
    guard: Annotated[AuthGuard, Depends(get_auth_guard)],
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT (or bypass mode) and return the caller."""
    return guard.authenticate(authorization)


def require_permission(permission: Permission, detail: str = "Forbidden"):
    """Dependency factory: 403 unless the caller's role grants `permission`."""

    def _check(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not has_permission(current_user.role, permission):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=detail,
            )
        return current_user

    return _check
