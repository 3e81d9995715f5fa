"""User queries - reading users."""

from userhub.application.queries.user.get_user_query import GetUserQuery
from userhub.application.queries.user.list_users_query import ListUsersQuery

__all__ = [
    "GetUserQuery",
    "ListUsersQuery",
]
