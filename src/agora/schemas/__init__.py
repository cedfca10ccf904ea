# src/agora/schemas/__init__.py
"""
Pydantic schemas for API request models.

These schemas validate request bodies before any synchronization runs.
"""

from .content import (
    CommentCreate,
    CommentUpdate,
    PostCreate,
    PostOptions,
    PostUpdate,
    ReactionCreate,
)
from .social import FollowRequest, ScoreUpdate
from .user import LoginRequest, PasswordUpdate, UserCreate, UsernameUpdate

__all__ = [
    "CommentCreate", "CommentUpdate",
    "FollowRequest",
    "LoginRequest",
    "PasswordUpdate",
    "PostCreate", "PostOptions", "PostUpdate",
    "ReactionCreate",
    "ScoreUpdate",
    "UserCreate", "UsernameUpdate",
]
