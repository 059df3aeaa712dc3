"""
Root query operations with optional case-insensitive text filters
"""

from __future__ import annotations

from dataclasses import dataclass

from ..store import Comment, EntityStore, Post, User

# Returned by ``me``; independent of the store contents.
CURRENT_USER = User(id="1234543", name="Mike", email="mike@exalmple.com")


@dataclass(frozen=True)
class ListFilter:
    """Substring filter accepted by the root list operations.

    An absent or empty ``query`` disables filtering.
    """

    query: str | None = None

    @property
    def active(self) -> bool:
        return bool(self.query)

    def matches(self, *values: str) -> bool:
        """True if any of ``values`` contains the query, ignoring case."""
        if not self.active:
            return True
        needle = str(self.query).lower()
        return any(needle in value.lower() for value in values)


NO_FILTER = ListFilter()


class QueryExecutor:
    """Resolve the root list fields against a store."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list_users(self, filter: ListFilter = NO_FILTER) -> list[User]:
        """Users whose name contains the query."""
        return [user for user in self.store.users if filter.matches(user.name)]

    def get_current_user(self) -> User:
        return CURRENT_USER

    def list_posts(self, filter: ListFilter = NO_FILTER) -> list[Post]:
        """Posts whose title or body contains the query."""
        return [post for post in self.store.posts if filter.matches(post.title, post.body)]

    def list_comments(self, filter: ListFilter = NO_FILTER) -> list[Comment]:
        """Comments whose text contains the query."""
        return [comment for comment in self.store.comments if filter.matches(comment.text)]
