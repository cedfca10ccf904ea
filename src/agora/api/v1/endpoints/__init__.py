# src/agora/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .comments import router as comments_router
from .follows import router as follows_router
from .friends import router as friends_router
from .posts import router as posts_router
from .reactions import router as reactions_router
from .scores import router as scores_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "users_router",
    "posts_router",
    "comments_router",
    "reactions_router",
    "friends_router",
    "follows_router",
    "scores_router",
]
