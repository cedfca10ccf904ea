"""Shared API dependencies: database session, synchronizations, session handle."""

from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from agora.core.security import decode_session_token, encode_session_token
from agora.core.settings import settings
from agora.db.session import get_db
from agora.sync import Synchronizations, build_concepts

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_sync(request: Request, db: SessionDep) -> Synchronizations:
    """Build the synchronizations for this request's database session.

    Args:
        request: Incoming request; its state receives the response shaper
        db: Database session

    Returns:
        Synchronizations over concepts bound to ``db``
    """
    sync = Synchronizations(build_concepts(db))
    # Exception handlers use this to render errors with usernames.
    request.state.responses = sync.responses
    return sync


SyncDep = Annotated[Synchronizations, Depends(get_sync)]


def get_session_handle(request: Request, response: Response, sync: SyncDep) -> str:
    """Return the caller's session handle.

    The handle travels in a signed cookie. A missing or tampered cookie is
    replaced by a fresh logged-out handle; nothing is stored for it until
    the caller logs in.

    Args:
        request: Incoming request carrying the cookie
        response: Response that receives a new cookie when one is issued
        sync: Synchronizations bound to this request

    Returns:
        The opaque session handle
    """
    token = request.cookies.get(settings.session_cookie_name)
    handle = decode_session_token(token) if token else None
    opened = sync.sessioning.open(handle)
    if opened != handle:
        response.set_cookie(
            settings.session_cookie_name,
            encode_session_token(opened),
            httponly=True,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
    return opened


SessionHandleDep = Annotated[str, Depends(get_session_handle)]
