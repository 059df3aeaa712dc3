"""
Root GraphQL query definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def users(
        self, info: strawberry.Info, query: str | None = strawberry.UNSET
    ) -> list[User]:
        """Get users, optionally filtered by a case-insensitive name substring."""
        from ..resolvers.user import resolve_users

        return resolve_users(info, query or None)

    @strawberry.field
    def me(self, info: strawberry.Info) -> User:
        """Get the current user."""
        from ..resolvers.user import resolve_current_user

        return resolve_current_user(info)

    @strawberry.field
    def posts(
        self, info: strawberry.Info, query: str | None = strawberry.UNSET
    ) -> list[Post]:
        """Get posts, optionally filtered by a substring of the title or body."""
        from ..resolvers.post import resolve_posts

        return resolve_posts(info, query or None)

    @strawberry.field
    def comments(
        self, info: strawberry.Info, query: str | None = strawberry.UNSET
    ) -> list[Comment]:
        """Get comments, optionally filtered by a substring of the text."""
        from ..resolvers.comment import resolve_comments

        return resolve_comments(info, query or None)
