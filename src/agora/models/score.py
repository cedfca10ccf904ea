# src/agora/models/score.py
"""SQLAlchemy model for item scores."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class Score(BaseDoc):
    """Numeric score of any item (user, post or comment), one row per item."""

    __tablename__ = "scores"

    item: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, unique=True)
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
