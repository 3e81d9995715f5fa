"""Username value object."""

from dataclasses import dataclass

from userhub.domain.user.exceptions import EmptyUsernameError


@dataclass(frozen=True)
class Username:
    """Value object representing a validated display name.

    Whitespace is only stripped for validation; the original string is kept.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise EmptyUsernameError()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Username({self.value!r})"
