"""Query to list all users."""

from __future__ import annotations

from userhub.domain.user import User, UserRepository


class ListUsersQuery:
    """Return a snapshot of every stored user, in no particular order."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self) -> list[User]:
        return await self._user_repo.get_all()
