"""Delete a user."""

from __future__ import annotations

from userhub.domain.user import UserId, UserNotFoundError, UserRepository


class DeleteUserCommand:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: int) -> None:
        deleted = await self._user_repo.delete(UserId(user_id))
        if not deleted:
            raise UserNotFoundError(user_id)
