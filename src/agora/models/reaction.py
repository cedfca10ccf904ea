# src/agora/models/reaction.py
"""SQLAlchemy model for reactions."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class Reaction(BaseDoc):
    """Free-form reaction (``"like"``, ``"laugh"``...) on a post or comment."""

    __tablename__ = "reactions"

    author: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    item: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
