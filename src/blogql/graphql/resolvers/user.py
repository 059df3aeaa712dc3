from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from graphql import GraphQLError

from ...engine import CreateUserArgs, ListFilter
from ...logging import get_logger
from ..context import (
    get_mutations_from_info,
    get_queries_from_info,
    get_relationships_from_info,
)

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
def resolve_users(info: strawberry.Info, query: str | None) -> list[User]:
    """Resolve all users, or those whose name contains ``query``."""
    from ..types.user import User as UserType

    users = get_queries_from_info(info).list_users(ListFilter(query))
    return [UserType.from_model(user) for user in users]


def resolve_current_user(info: strawberry.Info) -> User:
    """Resolve the fixed current-user record."""
    from ..types.user import User as UserType

    return UserType.from_model(get_queries_from_info(info).get_current_user())


# Field resolvers
def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    from ..types.post import Post as PostType

    posts = get_relationships_from_info(info).posts_of_user(user.record)
    return [PostType.from_model(post) for post in posts]


def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    comments = get_relationships_from_info(info).comments_by_user(user.record)
    return [CommentType.from_model(comment) for comment in comments]


# Mutation resolvers
def create_user(info: strawberry.Info, name: str, email: str, age: int | None) -> User:
    """
    Create a new user.

    Raises:
        GraphQLError: If another user already has ``email``
    """
    from ..types.user import User as UserType

    result = get_mutations_from_info(info).create_user(
        CreateUserArgs(name=name, email=email, age=age)
    )

    if result.error is not None:
        raise GraphQLError(result.error.message, extensions={"code": "DUPLICATE_EMAIL"})

    if result.user is None:
        raise RuntimeError("User creation returned no user")

    return UserType.from_model(result.user)
