"""User schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """Request schema for creating a user."""

    username: str = Field(..., description="Display name (must not be blank)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "mario"},
        },
    )


class UserUpdateRequest(BaseModel):
    """Request schema for replacing a user's username."""

    username: str = Field(..., description="New display name (must not be blank)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "luigi"},
        },
    )


class UserCreatedResponse(BaseModel):
    """Response schema for a newly created user."""

    id: int = Field(..., ge=0, description="Identifier assigned to the user")


class UserResponse(BaseModel):
    """Response schema for a single user."""

    id: int = Field(..., ge=0, description="User identifier")
    username: str = Field(..., description="Display name as submitted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": 4711, "username": "mario"},
        },
    )


class UserListResponse(BaseModel):
    """Response schema for all users. Order is not guaranteed."""

    users: list[UserResponse]
