"""Commenting concept."""
from __future__ import annotations

from typing import Any

from agora.core.errors import BadValuesError
from agora.models import Comment

from .content import OwnedContent


class CommentingConcept(OwnedContent[Comment]):
    """concept: Commenting [Author, Parent]

    The parent may be any item; this concept never looks it up.
    """

    kind = "comment"
    model = Comment
    fields = ("author", "content", "parent")

    def create(self, author: str, content: str, parent: str) -> dict[str, Any]:
        if not content:
            raise BadValuesError("Comment content must be non-empty!")
        comment = self.items.create_one(author=author, content=content, parent=parent)
        return {"msg": "Comment successfully created!", "comment": self.serialize(comment)}

    def get_by_parent(self, parent: str) -> list[dict[str, Any]]:
        return [self.serialize(doc) for doc in self.items.read_many(newest_first=True, parent=parent)]

    def update(self, _id: str, content: str | None = None) -> dict[str, str]:
        if content == "":
            raise BadValuesError("Comment content must be non-empty!")
        self.items.update_one(_id, {"content": content})
        return {"msg": "Comment successfully updated!"}
