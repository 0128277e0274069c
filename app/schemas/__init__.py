"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.product import (
    ProductBulkResponse,
    ProductCreatedResponse,
    ProductFields,
    ProductRead,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProductBulkResponse",
    "ProductCreatedResponse",
    "ProductFields",
    "ProductRead",
    "ProfileResponse",
    "RegisterRequest",
]
