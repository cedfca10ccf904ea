"""Generic document collection used by every concept."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.orm import Session

from agora.models import BaseDoc

__all__ = ["DocCollection", "as_dict"]

DocT = TypeVar("DocT", bound=BaseDoc)


class DocCollection(Generic[DocT]):
    """Thin wrapper around database access for one concept's table.

    Each mutating call commits on its own: a multi-step sequence built from
    these calls is not atomic.
    """

    def __init__(self, session: Session, model: type[DocT]) -> None:
        """Initialize the collection with a SQLAlchemy session and mapped model."""
        self.session = session
        self.model = model

    def _where(self, criteria: tuple[ColumnElement[bool], ...], filters: Mapping[str, Any]):
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        for field, value in filters.items():
            stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    def create_one(self, **fields: Any) -> DocT:
        """Insert a document and return it with its assigned id."""
        doc = self.model(**fields)
        self.session.add(doc)
        self.session.commit()
        self.session.refresh(doc)
        return doc

    def read_one(self, *criteria: ColumnElement[bool], **filters: Any) -> DocT | None:
        """Return the first document matching the filter, or None."""
        return self.session.scalars(self._where(criteria, filters).limit(1)).first()

    def read_many(
        self,
        *criteria: ColumnElement[bool],
        newest_first: bool = False,
        **filters: Any,
    ) -> list[DocT]:
        """Return every document matching the filter."""
        stmt = self._where(criteria, filters)
        if newest_first:
            stmt = stmt.order_by(self.model.created_at.desc())
        else:
            stmt = stmt.order_by(self.model.created_at)
        return list(self.session.scalars(stmt))

    def update_one(self, _id: str, patch: Mapping[str, Any]) -> DocT | None:
        """Apply ``patch`` to the document with id ``_id``.

        Keys whose value is None are ignored, so callers can pass optional
        fields straight through.
        """
        doc = self.session.get(self.model, _id)
        if doc is None:
            return None
        for field, value in patch.items():
            if value is not None:
                setattr(doc, field, value)
        self.session.commit()
        self.session.refresh(doc)
        return doc

    def delete_one(self, *criteria: ColumnElement[bool], **filters: Any) -> bool:
        """Delete the first matching document; return whether one existed."""
        doc = self.read_one(*criteria, **filters)
        if doc is None:
            return False
        self.session.delete(doc)
        self.session.commit()
        return True


def as_dict(doc: BaseDoc, *fields: str) -> dict[str, Any]:
    """Serialize ``doc`` with its id, timestamps and the named fields."""
    data: dict[str, Any] = {"_id": doc.id}
    for field in fields:
        data[field] = getattr(doc, field)
    data["dateCreated"] = doc.created_at
    data["dateUpdated"] = doc.updated_at
    return data
