# src/agora/models/comment.py
"""SQLAlchemy model for comments."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class Comment(BaseDoc):
    """Text attached to a parent item.

    ``parent`` is the id of a post or of another comment. It is deliberately
    untyped at the storage level: no foreign key, no kind column.
    """

    __tablename__ = "comments"

    author: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    parent: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
