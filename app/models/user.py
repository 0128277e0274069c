"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, Enum, String

from app.core.permissions import DEFAULT_ROLE, Role
from app.models.base import Base, RecordMixin


class User(RecordMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    email is unique and stored exactly as registered (no case folding or trimming).
    role is one of Role; the column rejects anything outside the closed set.
    """

    __tablename__ = "users"

    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=32,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=DEFAULT_ROLE,
    )
