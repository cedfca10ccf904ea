"""Shared behaviour of author-owned content concepts.

Posts, comments and reactions all answer the same two questions for the
synchronization layer: does an item with this id exist here, and is this user
its author. :class:`OwnedContent` implements both once, parameterized over the
mapped model and a human-readable kind name.
"""
from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.orm import Session

from agora.core.errors import NotAuthorError, NotFoundError
from agora.models import BaseDoc

from .base import DocCollection, as_dict

ContentT = TypeVar("ContentT", bound=BaseDoc)


class OwnedContent(Generic[ContentT]):
    """Existence and authorship assertions over one content collection."""

    kind: ClassVar[str] = "item"
    model: ClassVar[type[BaseDoc]]
    fields: ClassVar[tuple[str, ...]] = ("author",)

    def __init__(self, session: Session) -> None:
        self.items: DocCollection[ContentT] = DocCollection(session, self.model)  # type: ignore[arg-type]

    def serialize(self, doc: ContentT) -> dict[str, Any]:
        return as_dict(doc, *self.fields)

    def get_all(self) -> list[dict[str, Any]]:
        """Return every item, newest first."""
        return [self.serialize(doc) for doc in self.items.read_many(newest_first=True)]

    def get_by_author(self, author: str) -> list[dict[str, Any]]:
        return [self.serialize(doc) for doc in self.items.read_many(newest_first=True, author=author)]

    def get_by_id(self, _id: str) -> dict[str, Any]:
        doc = self.items.read_one(id=_id)
        if doc is None:
            raise NotFoundError(f"{self.kind.capitalize()} {{0}} does not exist!", _id)
        return self.serialize(doc)

    def delete(self, _id: str) -> dict[str, str]:
        self.items.delete_one(id=_id)
        return {"msg": f"{self.kind.capitalize()} deleted successfully!"}

    def assert_exists(self, _id: str) -> None:
        """Raise :class:`NotFoundError` unless an item with ``_id`` is stored here."""
        if self.items.read_one(id=_id) is None:
            raise NotFoundError(f"{self.kind.capitalize()} {{0}} does not exist!", _id)

    def assert_author_is_user(self, _id: str, user: str) -> None:
        """Check that ``user`` authored item ``_id``.

        The read and the comparison happen in one step; nothing is locked
        between this check and the caller's subsequent mutation.

        Raises:
            NotFoundError: If the item does not exist.
            NotAuthorError: If the stored author differs from ``user``.
        """
        doc = self.items.read_one(id=_id)
        if doc is None:
            raise NotFoundError(f"{self.kind.capitalize()} {{0}} does not exist!", _id)
        if doc.author != user:  # type: ignore[attr-defined]
            raise NotAuthorError(user, _id, self.kind)
