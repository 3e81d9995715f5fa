"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They validate
input through domain value objects and delegate storage to the repository.
"""

from userhub.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUsernameCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUsernameCommand",
]
