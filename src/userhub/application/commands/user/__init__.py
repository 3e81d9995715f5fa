"""User commands - creating, renaming and deleting users."""

from userhub.application.commands.user.create_user_command import (
    CreateUserCommand,
)
from userhub.application.commands.user.delete_user_command import (
    DeleteUserCommand,
)
from userhub.application.commands.user.update_username_command import (
    UpdateUsernameCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUsernameCommand",
]
