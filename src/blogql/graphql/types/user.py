"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import models

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    age: int | None
    record: strawberry.Private[models.User]

    @classmethod
    def from_model(cls, user: models.User) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            age=user.age,
            record=user,
        )

    @strawberry.field
    def posts(self, info: strawberry.Info) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return resolve_user_posts(self, info)

    @strawberry.field
    def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments written by this user."""
        from ..resolvers.user import resolve_user_comments

        return resolve_user_comments(self, info)
