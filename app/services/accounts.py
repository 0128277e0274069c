"""Registration and login flows over the user store."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.permissions import DEFAULT_ROLE, Role
from app.core.security import create_access_token, hash_password, verify_password
from app.models import User

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class AccountError(Exception):
    """Base for caller-facing registration/login failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RegistrationError(AccountError):
    """Registration rejected: missing fields or email already taken."""

    status_code = 400


class InvalidCredentialsError(AccountError):
    """Login rejected: unknown email or wrong password."""

    status_code = 401


def get_user_by_email(db: Session, email: str) -> User | None:
    """Exact-match lookup; emails are compared as stored."""
    return db.query(User).filter(User.email == email).first()


def register_user(
    db: Session,
    email: str | None,
    password: str | None,
    role: Role | None = None,
) -> User:
    """
    Create a user with a hashed password. Does not issue a token.

    Raises RegistrationError when email/password are missing or the email exists.
    """
    if not email or not password:
        raise RegistrationError("Email and password are required")

    if get_user_by_email(db, email) is not None:
        raise RegistrationError("Email already exists")

    user = User(
        email=email,
        password_hash=hash_password(password),
        role=role or DEFAULT_ROLE,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent registration of the same email.
        db.rollback()
        raise RegistrationError("Email already exists") from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def authenticate_user(
    db: Session,
    email: str | None,
    password: str | None,
    config: "Settings | None" = None,
) -> str:
    """Check credentials and return a fresh access token for the user's id and role."""
    user = get_user_by_email(db, email) if email else None
    if user is None:
        raise InvalidCredentialsError("User not found")
    if not verify_password(password or "", user.password_hash):
        logger.info("Login rejected for user id=%s: invalid password", user.id)
        raise InvalidCredentialsError("Invalid password")
    return create_access_token(sub=user.id, role=user.role, config=config)
