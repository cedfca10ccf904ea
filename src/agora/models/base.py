"""Columns shared by every stored document."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH, new_id
from agora.db.session import Base


def utcnow() -> datetime:
    return datetime.now(UTC)


class BaseDoc(Base):
    """Abstract base giving each row a global id and bookkeeping timestamps."""

    __abstract__ = True

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
