# src/agora/models/follow.py
"""SQLAlchemy model for directed follow edges."""

from sqlalchemy import CheckConstraint, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class Follow(BaseDoc):
    """``follower`` follows ``followee``."""

    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("follower", "followee", name="uq_follows_pair"),
        CheckConstraint("follower <> followee", name="ck_follows_not_self"),
    )

    follower: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    followee: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
