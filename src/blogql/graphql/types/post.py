"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import models

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    body: str
    published: bool
    record: strawberry.Private[models.Post]

    @classmethod
    def from_model(cls, post: models.Post) -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            body=post.body,
            published=post.published,
            record=post,
        )

    @strawberry.field
    def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        # A dangling author id yields None; GraphQL reports the non-null violation
        return resolve_post_author(self, info)  # type: ignore[return-value]

    @strawberry.field
    def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments left on this post."""
        from ..resolvers.post import resolve_post_comments

        return resolve_post_comments(self, info)
