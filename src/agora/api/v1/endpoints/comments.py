# src/agora/api/v1/endpoints/comments.py
"""Comment-related endpoints for the Agora API."""

from typing import Any

from fastapi import APIRouter, Query, status

from agora.schemas.content import CommentCreate, CommentUpdate

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("")
async def list_comments(
    sync: SyncDep,
    author: str | None = Query(None, description="Only return comments by this username"),
) -> list[dict[str, Any]]:
    """List comments, newest first, optionally only those by ``author``."""
    return sync.get_comments(author)


@router.get("/parent")
async def list_comments_by_parent(
    sync: SyncDep,
    parent: str = Query(..., description="Id of the post or comment"),
) -> list[dict[str, Any]]:
    """List the direct replies to a post or comment.

    Replies stay listed after their parent has been deleted.
    """
    return sync.get_comments_by_parent(parent)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(
    body: CommentCreate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, Any]:
    """Comment on a post or on another comment.

    Args:
        body: Comment text and the id of the item replied to
        session: Session handle of the caller
        sync: Synchronizations bound to this request

    Returns:
        The new comment and ``parentKind`` (``"Post"`` or ``"Comment"``)

    Raises:
        UnauthenticatedError: If the session is logged out
        ParentNotFoundError: If no post or comment has the parent id
    """
    return sync.create_comment(session, body.content, body.parent)


@router.patch("/{comment_id}")
async def update_comment(
    comment_id: str, body: CommentUpdate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Edit a comment's text.

    Raises:
        NotAuthorError: If the caller did not write the comment
        NotFoundError: If the comment does not exist
    """
    return sync.update_comment(session, comment_id, body.content)


@router.delete("/{comment_id}")
async def delete_comment(comment_id: str, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Delete a comment; only its author may do so."""
    return sync.delete_comment(session, comment_id)
