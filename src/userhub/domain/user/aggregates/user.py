from typing import Optional, Union

from userhub.domain.user.value_objects import UserId, Username


class User:
    """
    User aggregate root.

    Pairs an identifier with a display name. The identifier is assigned at
    creation time and never changes; the username can be replaced.
    """

    def __init__(
        self,
        username: Union[str, Username],
        id: Optional[Union[int, UserId]] = None,
    ):
        self._username = (
            username if isinstance(username, Username) else Username(username)
        )
        if id is None:
            self._id = UserId.generate()
        else:
            self._id = id if isinstance(id, UserId) else UserId(id)

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def username(self) -> Username:
        return self._username

    def rename(self, username: Union[str, Username]) -> None:
        self._username = (
            username if isinstance(username, Username) else Username(username)
        )

    @classmethod
    def create(cls, username: Union[str, Username]) -> "User":
        return cls(username=username)

    @classmethod
    def reconstitute(
        cls,
        id: Union[int, UserId],
        username: Union[str, Username],
    ) -> "User":
        return cls(username=username, id=id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username.value!r})"
