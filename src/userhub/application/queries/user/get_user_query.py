"""Query to get a single user by id."""

from __future__ import annotations

from userhub.domain.user import User, UserId, UserNotFoundError, UserRepository


class GetUserQuery:
    """Query to retrieve one user, raising when it does not exist."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, user_id: int) -> User:
        user = await self._user_repo.get(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user
