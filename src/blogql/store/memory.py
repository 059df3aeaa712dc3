"""
Process-lifetime entity store.

The store owns the User, Post and Comment collections. Reads return
snapshots in insertion order; ``add_user`` is the only write path.
"""

from __future__ import annotations

import threading
from collections import defaultdict
from collections.abc import Iterable

from ..logging import get_logger
from .models import Comment, Post, User

logger = get_logger(__name__)


class EntityStore:
    """In-memory collections with id and foreign-key indices.

    Seed records are trusted: foreign keys are not checked and duplicate
    emails in the seed set are accepted. Uniqueness of emails for new users
    is the caller's responsibility and must be checked while holding ``lock``.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        posts: Iterable[Post] = (),
        comments: Iterable[Comment] = (),
    ) -> None:
        self.lock = threading.RLock()

        self._users: list[User] = []
        self._posts: list[Post] = []
        self._comments: list[Comment] = []

        self._users_by_id: dict[str, User] = {}
        self._posts_by_id: dict[str, Post] = {}
        self._emails: set[str] = set()

        self._posts_by_author: defaultdict[str, list[Post]] = defaultdict(list)
        self._comments_by_author: defaultdict[str, list[Comment]] = defaultdict(list)
        self._comments_by_post: defaultdict[str, list[Comment]] = defaultdict(list)

        for user in users:
            self._insert_user(user)
        for post in posts:
            self._posts.append(post)
            self._posts_by_id.setdefault(post.id, post)
            self._posts_by_author[post.author].append(post)
        for comment in comments:
            self._comments.append(comment)
            self._comments_by_author[comment.author].append(comment)
            self._comments_by_post[comment.post].append(comment)

    # Collections

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    @property
    def posts(self) -> tuple[Post, ...]:
        return tuple(self._posts)

    @property
    def comments(self) -> tuple[Comment, ...]:
        return tuple(self._comments)

    # Lookups

    def get_user(self, user_id: str) -> User | None:
        return self._users_by_id.get(user_id)

    def get_post(self, post_id: str) -> Post | None:
        return self._posts_by_id.get(post_id)

    def posts_by_author(self, user_id: str) -> list[Post]:
        return list(self._posts_by_author.get(user_id, ()))

    def comments_by_author(self, user_id: str) -> list[Comment]:
        return list(self._comments_by_author.get(user_id, ()))

    def comments_on_post(self, post_id: str) -> list[Comment]:
        return list(self._comments_by_post.get(post_id, ()))

    def email_taken(self, email: str) -> bool:
        """Exact, case-sensitive match against every stored email."""
        return email in self._emails

    # Writes

    def add_user(self, user: User) -> User:
        """Append a user to the store.

        Raises:
            ValueError: If a user with the same id already exists
        """
        with self.lock:
            if user.id in self._users_by_id:
                raise ValueError(f"User id already exists: {user.id}")
            self._insert_user(user)

        logger.debug("User added to store", user_id=user.id, total_users=len(self._users))
        return user

    def _insert_user(self, user: User) -> None:
        self._users.append(user)
        self._users_by_id.setdefault(user.id, user)
        self._emails.add(user.email)

    def __repr__(self) -> str:
        return (
            f"EntityStore(users={len(self._users)}, posts={len(self._posts)}, "
            f"comments={len(self._comments)})"
        )
