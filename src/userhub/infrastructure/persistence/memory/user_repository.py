"""In-memory implementation of UserRepository."""

import copy
import logging
import threading
from typing import Optional

from userhub.domain.user import (
    User,
    UserId,
    UserIdConflictError,
    Username,
    UserRepository,
)

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository guarded by a single lock.

    Every operation takes the lock for one dict access and releases it
    before returning, so the lock is never held across an ``await``.
    Users are copied on the way in and out; callers never share the
    stored objects.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._lock = threading.Lock()

    async def save(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = copy.copy(user)
        logger.debug("Saved user: %s", user.id)

    async def add(self, user: User) -> None:
        with self._lock:
            if user.id in self._users:
                raise UserIdConflictError(int(user.id))
            self._users[user.id] = copy.copy(user)
        logger.info("Created user: %s", user.id)

    async def get(self, user_id: UserId) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.copy(user) if user is not None else None

    async def get_all(self) -> list[User]:
        with self._lock:
            return [copy.copy(user) for user in self._users.values()]

    async def update_username(
        self,
        user_id: UserId,
        username: Username,
    ) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = copy.copy(user)
            updated.rename(username)
            self._users[user_id] = updated
            result = copy.copy(updated)
        logger.debug("Renamed user: %s", user_id)
        return result

    async def delete(self, user_id: UserId) -> bool:
        with self._lock:
            deleted = self._users.pop(user_id, None) is not None
        if deleted:
            logger.info("Deleted user: %s", user_id)
        return deleted

    async def count(self) -> int:
        with self._lock:
            return len(self._users)
