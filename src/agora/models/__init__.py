# src/agora/models/__init__.py
"""SQLAlchemy models for the Agora application."""

from .base import BaseDoc
from .comment import Comment
from .follow import Follow
from .friend import FriendRequest, Friendship
from .post import Post
from .reaction import Reaction
from .score import Score
from .session import AuthSession
from .user import User

__all__ = [
    "BaseDoc",
    "AuthSession",
    "Comment",
    "Follow",
    "FriendRequest", "Friendship",
    "Post",
    "Reaction",
    "Score",
    "User",
]
