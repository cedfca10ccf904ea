# src/agora/api/v1/endpoints/reactions.py
"""Reaction-related endpoints for the Agora API."""

from typing import Any

from fastapi import APIRouter, Query, status

from agora.schemas.content import ReactionCreate

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(prefix="/reactions", tags=["reactions"])


@router.get("")
async def list_reactions(
    sync: SyncDep,
    author: str | None = Query(None, description="Only return reactions by this username"),
) -> list[dict[str, Any]]:
    """List reactions, newest first, optionally only those by ``author``."""
    return sync.get_reactions(author)


@router.get("/item")
async def list_reactions_by_item(
    sync: SyncDep,
    item: str = Query(..., description="Id of the post or comment"),
) -> list[dict[str, Any]]:
    """List the reactions attached to a post or comment."""
    return sync.get_reactions_by_item(item)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_reaction(
    body: ReactionCreate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, Any]:
    """React to a post or comment.

    Args:
        body: Reaction tag and the id of the item reacted to
        session: Session handle of the caller
        sync: Synchronizations bound to this request

    Returns:
        The new reaction and ``itemKind`` (``"Post"`` or ``"Comment"``)

    Raises:
        UnauthenticatedError: If the session is logged out
        ParentNotFoundError: If no post or comment has the item id
    """
    return sync.create_reaction(session, body.type, body.item)


@router.delete("/{reaction_id}")
async def delete_reaction(
    reaction_id: str, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Remove a reaction; only the user who reacted may do so."""
    return sync.delete_reaction(session, reaction_id)
