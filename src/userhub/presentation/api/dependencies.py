"""FastAPI dependency injection for the Userhub API.

Provides dependencies for:
- The application's user repository
- Application settings
- Command and query instances
"""

from typing import Annotated

from fastapi import Depends, Request

from userhub.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUsernameCommand,
)
from userhub.application.queries import GetUserQuery, ListUsersQuery
from userhub.domain.user import UserRepository
from userhub_config.settings import Settings


def get_user_repository(request: Request) -> UserRepository:
    """
    Get the repository owned by the running application.

    The instance is created once in ``create_app`` and lives for the
    whole process; every request shares it.
    """
    return request.app.state.user_repository


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Application Commands & Queries
# -----------------------------------------------------------------------------


def get_create_user_command(
    user_repo: UserRepo,
    settings: AppSettings,
) -> CreateUserCommand:
    return CreateUserCommand(
        user_repo=user_repo,
        max_attempts=settings.user_id_max_attempts,
    )


def get_update_username_command(user_repo: UserRepo) -> UpdateUsernameCommand:
    return UpdateUsernameCommand(user_repo)


def get_delete_user_command(user_repo: UserRepo) -> DeleteUserCommand:
    return DeleteUserCommand(user_repo)


def get_user_query(user_repo: UserRepo) -> GetUserQuery:
    return GetUserQuery(user_repo)


def get_list_users_query(user_repo: UserRepo) -> ListUsersQuery:
    return ListUsersQuery(user_repo)


CreateUser = Annotated[CreateUserCommand, Depends(get_create_user_command)]
UpdateUsername = Annotated[UpdateUsernameCommand, Depends(get_update_username_command)]
DeleteUser = Annotated[DeleteUserCommand, Depends(get_delete_user_command)]
GetUser = Annotated[GetUserQuery, Depends(get_user_query)]
ListUsers = Annotated[ListUsersQuery, Depends(get_list_users_query)]
