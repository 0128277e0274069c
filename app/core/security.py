"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings, get_settings
from app.core.permissions import Role, parse_role

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    subject_id: str
    role: Role


@dataclass(frozen=True)
class TokenRejected:
    """Verification failure; reason is for logs only, never sent to clients."""

    reason: str


TokenVerification = TokenClaims | TokenRejected


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; longer inputs are truncated.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str,
    role: Role | str,
    config: Settings | None = None,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT access token with sub (user id), role, iat and exp."""
    config = config or get_settings()
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=config.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": str(role),
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload,
        config.JWT_SECRET.get_secret_value(),
        algorithm=config.JWT_ALGORITHM,
    )


def verify_access_token(token: str, config: Settings | None = None) -> TokenVerification:
    """
    Decode and validate a JWT.

    Returns TokenClaims on success. Bad signature, malformed payload, unknown
    role or an expired token all yield TokenRejected; nothing is raised.
    """
    config = config or get_settings()
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET.get_secret_value(),
            algorithms=[config.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        return TokenRejected("expired")
    except jwt.PyJWTError as e:
        return TokenRejected(f"invalid: {e.__class__.__name__}")

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        return TokenRejected("malformed payload: sub")
    role = parse_role(payload.get("role"))
    if role is None:
        return TokenRejected("malformed payload: role")
    return TokenClaims(subject_id=sub, role=role)
