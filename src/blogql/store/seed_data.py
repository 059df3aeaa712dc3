"""
Demo records loaded into the store at startup.

This module provides the fixed users, posts and comments the server starts
with, and a helper that builds a populated store from them.
"""

from __future__ import annotations

from ..logging import get_logger
from .memory import EntityStore
from .models import Comment, Post, User

logger = get_logger(__name__)


DEMO_USERS: tuple[User, ...] = (
    User(id="1", name="Andrew", email="andrew@example.com", age=27),
    User(id="2", name="Sarah", email="sarahw@example.com"),
    User(id="3", name="Mike", email="mike@example.com"),
)

DEMO_POSTS: tuple[Post, ...] = (
    Post(
        id="1",
        title="Post title 1",
        body="Body of the post 1 lel",
        published=True,
        author="1",
    ),
    Post(
        id="2",
        title="Post title 2",
        body="Body of the post 2",
        published=False,
        author="1",
    ),
    Post(
        id="3",
        title="Post title 3 ",
        body="Body of the post 3",
        published=True,
        author="2",
    ),
)

DEMO_COMMENTS: tuple[Comment, ...] = (
    Comment(id="1", text="Commento 1", author="1", post="2"),
    Comment(id="2", text="Commento 2", author="2", post="2"),
    Comment(id="3", text="Commento 3", author="2", post="1"),
    Comment(id="4", text="Commento 4", author="3", post="2"),
)


def demo_store() -> EntityStore:
    """
    Build a new store holding the demo records.

    Every call returns an independent store, so tests and app instances
    never share mutations.

    Returns:
        EntityStore seeded with the demo users, posts and comments
    """
    store = EntityStore(users=DEMO_USERS, posts=DEMO_POSTS, comments=DEMO_COMMENTS)
    logger.debug(
        "Demo store seeded",
        users=len(DEMO_USERS),
        posts=len(DEMO_POSTS),
        comments=len(DEMO_COMMENTS),
    )
    return store
