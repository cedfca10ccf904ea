# src/agora/api/v1/endpoints/auth.py
"""Session endpoints: who am I, log in, log out."""

from typing import Any

from fastapi import APIRouter

from agora.schemas.user import LoginRequest

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(tags=["authentication"])


@router.get("/session")
async def get_session_user(session: SessionHandleDep, sync: SyncDep) -> dict[str, Any]:
    """Return the user bound to the current session."""
    return sync.get_session_user(session)


@router.post("/login")
async def log_in(body: LoginRequest, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Log in; the session must be logged out first."""
    return sync.log_in(session, body.username, body.password)


@router.post("/logout")
async def log_out(session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Log out; logging out twice is harmless."""
    return sync.log_out(session)
