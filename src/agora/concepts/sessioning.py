"""Sessioning concept: binds opaque session handles to identities."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from agora.core.errors import AlreadyLoggedInError, UnauthenticatedError
from agora.db.ids import new_id
from agora.models import AuthSession

from .base import DocCollection

logger = logging.getLogger(__name__)


class SessioningConcept:
    """concept: Sessioning [User]

    A session with no bound user is logged out. Unknown handles behave like
    logged-out sessions.
    """

    def __init__(self, session: Session) -> None:
        self.sessions = DocCollection(session, AuthSession)

    def open(self, handle: str | None = None) -> str:
        """Return ``handle``, or allocate a fresh logged-out handle when there is none.

        Nothing is stored until :meth:`start` binds a user, so anonymous
        traffic leaves no rows behind.
        """
        if handle is not None:
            return handle
        return new_id()

    def start(self, handle: str, user: str) -> None:
        """Bind ``user`` to the session.

        Callers check :meth:`is_logged_out` first.
        """
        if self.sessions.read_one(id=handle) is None:
            self.sessions.create_one(id=handle, user_id=user)
        else:
            self.sessions.update_one(handle, {"user_id": user})
        logger.info("Session %s started for user %s", handle, user)

    def end(self, handle: str) -> None:
        """Unbind the session; ending a logged-out session is a no-op."""
        doc = self.sessions.read_one(id=handle)
        if doc is None or doc.user_id is None:
            return
        doc.user_id = None
        self.sessions.session.commit()
        logger.info("Session %s ended", handle)

    def end_all_for_user(self, user: str) -> int:
        """Log ``user`` out of every session and return how many were bound."""
        docs = self.sessions.read_many(user_id=user)
        for doc in docs:
            doc.user_id = None
        self.sessions.session.commit()
        return len(docs)

    def get_user(self, handle: str) -> str:
        """Return the bound user id.

        Raises:
            UnauthenticatedError: If no user is bound to the session.
        """
        doc = self.sessions.read_one(id=handle)
        if doc is None or doc.user_id is None:
            raise UnauthenticatedError("Must be logged in!")
        return doc.user_id

    def is_logged_out(self, handle: str) -> None:
        """Raise :class:`AlreadyLoggedInError` unless the session is logged out."""
        doc = self.sessions.read_one(id=handle)
        if doc is not None and doc.user_id is not None:
            raise AlreadyLoggedInError()
