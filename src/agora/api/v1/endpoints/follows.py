# src/agora/api/v1/endpoints/follows.py
"""Follow endpoints."""

from typing import Any

from fastapi import APIRouter, Query, status

from agora.schemas.social import FollowRequest

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(tags=["follows"])


@router.get("/followers")
async def list_followers(sync: SyncDep, username: str = Query(...)) -> list[dict[str, Any]]:
    """Return who follows ``username``."""
    return sync.get_followers(username)


@router.get("/following")
async def list_following(sync: SyncDep, username: str = Query(...)) -> list[dict[str, Any]]:
    """Return who ``username`` follows."""
    return sync.get_following(username)


@router.post("/follow", status_code=status.HTTP_201_CREATED)
async def follow(body: FollowRequest, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Follow another user.

    Raises:
        NotAllowedError: If the caller follows themself or already follows the user
    """
    return sync.follow(session, body.username)


@router.delete("/follow")
async def unfollow(
    session: SessionHandleDep, sync: SyncDep, username: str = Query(...)
) -> dict[str, str]:
    """Stop following ``username``."""
    return sync.unfollow(session, username)
