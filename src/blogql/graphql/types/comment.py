"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import models

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str
    record: strawberry.Private[models.Comment]

    @classmethod
    def from_model(cls, comment: models.Comment) -> "Comment":
        return cls(id=strawberry.ID(comment.id), text=comment.text, record=comment)

    @strawberry.field
    def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the author of this comment."""
        from ..resolvers.comment import resolve_comment_author

        return resolve_comment_author(self, info)  # type: ignore[return-value]

    @strawberry.field
    def post(self, info: strawberry.Info) -> Annotated["Post", strawberry.lazy(".post")]:
        """Get the post this comment belongs to."""
        from ..resolvers.comment import resolve_comment_post

        return resolve_comment_post(self, info)  # type: ignore[return-value]
