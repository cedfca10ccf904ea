# src/agora/models/session.py
"""SQLAlchemy model for login sessions."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class AuthSession(BaseDoc):
    """Opaque session handle, bound to at most one user.

    A null ``user_id`` means the session is logged out.
    """

    __tablename__ = "sessions"

    user_id: Mapped[str | None] = mapped_column(String(ID_LENGTH), nullable=True, index=True)
