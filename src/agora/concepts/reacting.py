"""Reacting concept."""
from __future__ import annotations

from typing import Any

from agora.core.errors import BadValuesError
from agora.models import Reaction

from .content import OwnedContent


class ReactingConcept(OwnedContent[Reaction]):
    """concept: Reacting [Author, Item]"""

    kind = "reaction"
    model = Reaction
    fields = ("author", "type", "item")

    def create(self, author: str, type: str, item: str) -> dict[str, Any]:
        if not type:
            raise BadValuesError("Reaction type must be non-empty!")
        reaction = self.items.create_one(author=author, type=type, item=item)
        return {"msg": "Reaction successfully created!", "reaction": self.serialize(reaction)}

    def get_by_item(self, item: str) -> list[dict[str, Any]]:
        return [self.serialize(doc) for doc in self.items.read_many(newest_first=True, item=item)]
