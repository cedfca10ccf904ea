# src/agora/api/v1/endpoints/users.py
"""User account endpoints."""

from typing import Any

from fastapi import APIRouter, Query, status

from agora.schemas.user import PasswordUpdate, UserCreate, UsernameUpdate

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(
    sync: SyncDep,
    username: str | None = Query(None, description="Only return this username"),
) -> list[dict[str, Any]]:
    """List users, or just the one named ``username``."""
    return sync.get_users(username)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, session: SessionHandleDep, sync: SyncDep) -> dict[str, Any]:
    """Register a new account; the session must be logged out."""
    return sync.create_user(session, body.username, body.password)


@router.patch("/username")
async def update_username(
    body: UsernameUpdate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Rename the current user.

    Raises:
        UnauthenticatedError: If the session is logged out
        DuplicateUsernameError: If the new name is taken
    """
    return sync.update_username(session, body.username)


@router.patch("/password")
async def update_password(
    body: PasswordUpdate, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Change the current user's password.

    Args:
        body: Current and new password
        session: Session handle of the caller
        sync: Synchronizations bound to this request

    Returns:
        Confirmation message

    Raises:
        InvalidCredentialsError: If the current password is wrong
    """
    return sync.update_password(session, body.current_password, body.new_password)


@router.delete("")
async def delete_user(session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Delete the current account and log it out everywhere."""
    return sync.delete_user(session)


@router.get("/{username}")
async def get_user(username: str, sync: SyncDep) -> dict[str, Any]:
    """Return a user by username, without credentials."""
    return sync.get_user(username)
