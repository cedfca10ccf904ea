# src/agora/models/post.py
"""SQLAlchemy model for posts."""

from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc


class Post(BaseDoc):
    """Top-level content owned by its author."""

    __tablename__ = "posts"

    author: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Presentation options, e.g. {"backgroundColor": "#ffeeaa"}.
    options: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
