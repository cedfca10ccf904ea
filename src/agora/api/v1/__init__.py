# src/agora/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    comments_router,
    follows_router,
    friends_router,
    posts_router,
    reactions_router,
    scores_router,
    users_router,
)

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
