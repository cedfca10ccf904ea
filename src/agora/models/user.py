# src/agora/models/user.py
"""SQLAlchemy model for user identities."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDoc


class User(BaseDoc):
    """Identity with a unique, case-sensitive username.

    The password hash never leaves the Authenticating concept.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
