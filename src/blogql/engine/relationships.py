"""
One-hop relationship lookups between users, posts and comments
"""

from __future__ import annotations

from ..logging import get_logger
from ..store import Comment, EntityStore, Post, User

logger = get_logger(__name__)


class RelationshipResolver:
    """Follow foreign keys from a parent record to its related records.

    A foreign key with no matching target resolves to ``None`` (single
    lookups) or to an empty list; absence is never an error.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # Post relationships

    def author_of_post(self, post: Post) -> User | None:
        user = self.store.get_user(post.author)
        if user is None:
            logger.debug("Post author not found", post_id=post.id, author_id=post.author)
        return user

    def comments_of_post(self, post: Post) -> list[Comment]:
        return self.store.comments_on_post(post.id)

    # User relationships

    def posts_of_user(self, user: User) -> list[Post]:
        return self.store.posts_by_author(user.id)

    def comments_by_user(self, user: User) -> list[Comment]:
        return self.store.comments_by_author(user.id)

    # Comment relationships

    def author_of_comment(self, comment: Comment) -> User | None:
        user = self.store.get_user(comment.author)
        if user is None:
            logger.debug(
                "Comment author not found", comment_id=comment.id, author_id=comment.author
            )
        return user

    def post_of_comment(self, comment: Comment) -> Post | None:
        post = self.store.get_post(comment.post)
        if post is None:
            logger.debug("Comment post not found", comment_id=comment.id, post_id=comment.post)
        return post
