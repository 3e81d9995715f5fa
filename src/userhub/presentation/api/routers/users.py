"""Users router for creating, reading, renaming and deleting users."""

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from userhub.domain.user import USER_ID_MAX, User
from userhub.presentation.api.dependencies import (
    CreateUser,
    DeleteUser,
    GetUser,
    ListUsers,
    UpdateUsername,
)
from userhub.presentation.api.schemas import (
    ErrorResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()

UserIdPath = Annotated[
    int,
    Path(ge=0, le=USER_ID_MAX, description="User identifier"),
]


def _to_response(user: User) -> UserResponse:
    return UserResponse(id=int(user.id), username=str(user.username))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Blank username"},
    },
)
async def create_user(
    request: UserCreateRequest,
    command: CreateUser,
) -> UserCreatedResponse:
    """Create a user and return its assigned id."""
    user = await command.execute(request.username)
    return UserCreatedResponse(id=int(user.id))


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "All users, in no particular order"},
    },
)
async def list_users(query: ListUsers) -> UserListResponse:
    users = await query.execute()
    return UserListResponse(users=[_to_response(user) for user in users])


@router.get(
    "/{user_id}",
    summary="Get user by ID",
    responses={
        200: {"description": "User details"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(
    query: GetUser,
    user_id: UserIdPath,
) -> UserResponse:
    user = await query.execute(user_id)
    return _to_response(user)


@router.put(
    "/{user_id}",
    summary="Rename user",
    responses={
        200: {"description": "User renamed"},
        400: {"model": ErrorResponse, "description": "Blank username"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_user(
    request: UserUpdateRequest,
    command: UpdateUsername,
    user_id: UserIdPath,
) -> UserResponse:
    """
    Replace the username of an existing user.

    The id is preserved. Returns the updated user.
    """
    user = await command.execute(user_id, request.username)
    return _to_response(user)


@router.delete(
    "/{user_id}",
    summary="Delete user",
    responses={
        200: {"description": "User deleted"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_user(
    command: DeleteUser,
    user_id: UserIdPath,
) -> Response:
    await command.execute(user_id)
    return Response(status_code=status.HTTP_200_OK)
