"""
In-memory entity store for users, posts and comments
"""

from .memory import EntityStore
from .models import Comment, Post, User
from .seed_data import demo_store

__all__ = ["Comment", "EntityStore", "Post", "User", "demo_store"]
