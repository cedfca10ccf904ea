# src/agora/api/v1/endpoints/scores.py
"""Score endpoints.

There is no endpoint for creating scores: they are created when the scored
user, post or comment is created.
"""

from typing import Any

from fastapi import APIRouter

from agora.schemas.social import ScoreUpdate

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(prefix="/score", tags=["scores"])


@router.get("")
async def get_own_score(session: SessionHandleDep, sync: SyncDep) -> dict[str, Any]:
    """Return the current user's score."""
    return sync.get_score(session)


@router.get("/{item}")
async def get_score(item: str, sync: SyncDep) -> dict[str, Any]:
    """Return the score of a user, post or comment by id."""
    return sync.get_score_by_item(item)


@router.patch("/{item}")
async def update_score(
    item: str, body: ScoreUpdate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, Any]:
    """Set the score of an item.

    Args:
        item: Id of the scored user, post or comment
        body: New finite score
        session: Session handle of the caller
        sync: Synchronizations bound to this request

    Returns:
        The updated score record

    Raises:
        UnauthenticatedError: If the session is logged out
        NotFoundError: If the item has no score
    """
    return sync.update_score_by_item(session, item, body.score)
