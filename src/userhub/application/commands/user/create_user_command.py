"""Create a new user with a fresh identifier."""

from __future__ import annotations

import logging

from userhub.domain.user import User, UserIdConflictError, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class CreateUserCommand:
    """Validate a username and store a new user under an unused id."""

    def __init__(
        self,
        user_repo: UserRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        self._user_repo = user_repo
        self._max_attempts = max_attempts

    async def execute(self, username: str) -> User:
        attempt = 1
        while True:
            # Raises EmptyUsernameError before anything is stored
            user = User.create(username)
            try:
                await self._user_repo.add(user)
            except UserIdConflictError:
                if attempt >= self._max_attempts:
                    raise
                logger.warning(
                    "Generated user id %s already in use (attempt %d/%d)",
                    user.id,
                    attempt,
                    self._max_attempts,
                )
                attempt += 1
                continue
            return user
