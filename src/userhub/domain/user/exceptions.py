"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from userhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class EmptyUsernameError(ValidationError):
    """
    Raised when a username is empty or whitespace only.

    This exception is raised during Username value object creation,
    and therefore also during User creation.
    """

    def __init__(self) -> None:
        super().__init__(
            "Username cannot be empty",
            code=ErrorCode.EMPTY_USERNAME,
        )


class InvalidUserIdError(ValidationError):
    """User id is not an unsigned 64-bit integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid user id: {value!r}",
            code=ErrorCode.INVALID_USER_ID,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class UserIdConflictError(ConflictError):
    """A user with the same id is already stored."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User id already in use: {user_id}",
            code=ErrorCode.DUPLICATE_USER_ID,
            details={"user_id": user_id},
        )
