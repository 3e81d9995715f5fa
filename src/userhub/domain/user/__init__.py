"""User domain - manages user identity and display names.

This domain handles:
- User aggregate (identifier, username)
- Username and UserId value objects
- Repository contract for storing users

Design notes:
- User ID is a random integer generated at creation (opaque, unsigned 64-bit)
- Username keeps the caller's original string; trimming is validation only
- Repository interface defined here, implementation in infrastructure
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.exceptions import (
    EmptyUsernameError,
    InvalidUserIdError,
    UserIdConflictError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository
from userhub.domain.user.value_objects import USER_ID_MAX, UserId, Username

__all__ = [
    "EmptyUsernameError",
    "InvalidUserIdError",
    "USER_ID_MAX",
    "User",
    "UserId",
    "UserIdConflictError",
    "UserNotFoundError",
    "UserRepository",
    "Username",
]
