"""User identifier value object.

Identifiers are random 63-bit integers. Collisions are detected by the
repository on insert, never assumed away.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from userhub.domain.user.exceptions import InvalidUserIdError

USER_ID_MAX = 2**64 - 1
_GENERATED_BITS = 63


@dataclass(frozen=True, order=True)
class UserId:
    """Opaque unsigned 64-bit identifier of a user."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidUserIdError(self.value)
        if not 0 <= self.value <= USER_ID_MAX:
            raise InvalidUserIdError(self.value)

    @classmethod
    def generate(cls) -> UserId:
        value = 0
        while value == 0:
            value = secrets.randbits(_GENERATED_BITS)
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
