"""Replace the username of an existing user."""

from __future__ import annotations

from userhub.domain.user import (
    EmptyUsernameError,
    User,
    UserId,
    Username,
    UserNotFoundError,
    UserRepository,
)


class UpdateUsernameCommand:
    """Rename a user; the id is preserved."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: int, username: str) -> User:
        id_ = UserId(user_id)
        try:
            new_username = Username(username)
        except EmptyUsernameError:
            # An unknown id wins over an invalid username
            if await self._user_repo.get(id_) is None:
                raise UserNotFoundError(user_id) from None
            raise

        user = await self._user_repo.update_username(id_, new_username)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
