# src/agora/api/v1/endpoints/posts.py
"""Post-related endpoints for the Agora API."""

from typing import Any

from fastapi import APIRouter, Query, status

from agora.schemas.content import PostCreate, PostOptions, PostUpdate

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(prefix="/posts", tags=["posts"])


def _options(options: PostOptions | None) -> dict[str, Any] | None:
    if options is None:
        return None
    return options.model_dump(by_alias=True, exclude_none=True) or None


@router.get("")
async def list_posts(
    sync: SyncDep,
    author: str | None = Query(None, description="Only return posts by this username"),
) -> list[dict[str, Any]]:
    """List posts, newest first."""
    return sync.get_posts(author)


@router.get("/{post_id}")
async def get_post(post_id: str, sync: SyncDep) -> dict[str, Any]:
    """Return a single post by id."""
    return sync.get_post(post_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(body: PostCreate, session: SessionHandleDep, sync: SyncDep) -> dict[str, Any]:
    """Create a post as the current user."""
    return sync.create_post(session, body.content, _options(body.options))


@router.patch("/{post_id}")
async def update_post(
    post_id: str, body: PostUpdate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Edit a post; only its author may do so."""
    return sync.update_post(session, post_id, body.content, _options(body.options))


@router.delete("/{post_id}")
async def delete_post(post_id: str, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Delete a post; only its author may do so."""
    return sync.delete_post(session, post_id)
