"""Request/response schemas for account and auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.permissions import Role


class RegisterRequest(BaseModel):
    """Registration body. Presence of email/password is checked by the service (400)."""

    email: str | None = Field(default=None, max_length=320, description="Email")
    password: str | None = Field(default=None, max_length=1024, description="Password")
    role: Role | None = Field(default=None, description="Defaults to Agent")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, description="Email")
    password: str | None = Field(default=None, description="Password")


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    message: str
    token: str = Field(..., description="JWT access token, sent back as 'Bearer <token>'")


class CurrentUser(BaseModel):
    """Identity attached to a request by the auth guard."""

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role


class ProfileResponse(BaseModel):
    """Response for GET /profile."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: str = Field(..., alias="userId")
    role: Role
