"""Value objects for the user domain."""

from userhub.domain.user.value_objects.user_id import USER_ID_MAX, UserId
from userhub.domain.user.value_objects.username import Username

__all__ = [
    "USER_ID_MAX",
    "UserId",
    "Username",
]
