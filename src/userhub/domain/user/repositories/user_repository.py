"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userhub.domain.user.aggregates.user import User
from userhub.domain.user.value_objects import UserId, Username


class UserRepository(ABC):
    """Repository interface for User aggregates.

    The in-memory implementation is the only backend today; a durable store
    plugs in by implementing the same operations.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        If a user with the same ID is stored, it is replaced.
        Otherwise the user is inserted.

        Parameters
        ----------
        user
            The user to save
        """

    @abstractmethod
    async def add(self, user: User) -> None:
        """
        Insert a new user.

        Parameters
        ----------
        user
            The user to insert

        Raises
        ------
        UserIdConflictError
            If a user with the same ID is already stored
        """

    @abstractmethod
    async def get(self, user_id: UserId) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's identifier

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def get_all(self) -> list[User]:
        """
        Return a snapshot of all stored users.

        Order is unspecified.
        """

    @abstractmethod
    async def update_username(
        self,
        user_id: UserId,
        username: Username,
    ) -> Optional[User]:
        """
        Replace the username of a stored user in a single operation.

        Parameters
        ----------
        user_id
            The user's identifier
        username
            The validated new username

        Returns
        -------
        The updated User if found, None otherwise
        """

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """
        Delete a user by ID.

        Parameters
        ----------
        user_id
            The user's identifier

        Returns
        -------
        True if a user was removed, False if none was stored
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored users."""
