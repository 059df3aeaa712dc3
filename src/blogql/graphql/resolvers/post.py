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
def resolve_posts(info: strawberry.Info, query: str | None) -> list[Post]:
    """Resolve all posts, or those whose title or body contains ``query``."""
    from ..types.post import Post as PostType

    posts = get_queries_from_info(info).list_posts(ListFilter(query))
    return [PostType.from_model(post) for post in posts]


# Field resolvers
def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    author = get_relationships_from_info(info).author_of_post(post.record)
    if author is None:
        return None
    return UserType.from_model(author)


def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    comments = get_relationships_from_info(info).comments_of_post(post.record)
    return [CommentType.from_model(comment) for comment in comments]
