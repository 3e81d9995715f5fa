"""Pydantic schemas for API request/response models."""

from userhub.presentation.api.schemas.common import ErrorResponse, HealthResponse
from userhub.presentation.api.schemas.users import (
    UserCreatedResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserCreateRequest",
    "UserCreatedResponse",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
]
