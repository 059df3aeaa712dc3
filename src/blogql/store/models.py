"""
Entity records held by the store.

Records are plain data. Relationships are never stored on them, only the
foreign keys (``Post.author``, ``Comment.author``, ``Comment.post``) that the
relationship resolver follows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user."""

    id: str
    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class Post:
    """A post written by a user."""

    id: str
    title: str
    body: str
    published: bool
    author: str  # User.id


@dataclass(frozen=True)
class Comment:
    """A comment left by a user on a post."""

    id: str
    text: str
    author: str  # User.id
    post: str  # Post.id
