from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...engine import ListFilter
from ..context import get_queries_from_info, get_relationships_from_info

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User


# Query resolvers
def resolve_comments(info: strawberry.Info, query: str | None) -> list[Comment]:
    """Resolve all comments, or those whose text contains ``query``."""
    from ..types.comment import Comment as CommentType

    comments = get_queries_from_info(info).list_comments(ListFilter(query))
    return [CommentType.from_model(comment) for comment in comments]


# Field resolvers
def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    author = get_relationships_from_info(info).author_of_comment(comment.record)
    if author is None:
        return None
    return UserType.from_model(author)


def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post | None:
    from ..types.post import Post as PostType

    post = get_relationships_from_info(info).post_of_comment(comment.record)
    if post is None:
        return None
    return PostType.from_model(post)
