"""Posting concept."""
from __future__ import annotations

from typing import Any

from agora.core.errors import BadValuesError
from agora.models import Post

from .content import OwnedContent


class PostingConcept(OwnedContent[Post]):
    """concept: Posting [Author]"""

    kind = "post"
    model = Post
    fields = ("author", "content", "options")

    def create(self, author: str, content: str, options: dict[str, Any] | None = None) -> dict[str, Any]:
        if not content:
            raise BadValuesError("Post content must be non-empty!")
        post = self.items.create_one(author=author, content=content, options=options)
        return {"msg": "Post successfully created!", "post": self.serialize(post)}

    def update(
        self,
        _id: str,
        content: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, str]:
        if content == "":
            raise BadValuesError("Post content must be non-empty!")
        self.items.update_one(_id, {"content": content, "options": options})
        return {"msg": "Post successfully updated!"}
