"""Scoring concept: one numeric score per item id.

Scores are created by synchronizations when an item is created, never by a
client request. How a score is computed is left to app-level features.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from agora.core.errors import NotAllowedError, NotFoundError
from agora.models import Score

from .base import DocCollection, as_dict


class ScoringConcept:
    """concept: Scoring [Item]"""

    def __init__(self, session: Session) -> None:
        self.scores = DocCollection(session, Score)

    def create(self, item: str, score: float = 0.0) -> dict[str, Any]:
        if self.scores.read_one(item=item) is not None:
            raise NotAllowedError("Item {0} already has a score!", item)
        doc = self.scores.create_one(item=item, score=score)
        return {"msg": "Score created!", "score": as_dict(doc, "item", "score")}

    def get_by_item(self, item: str) -> dict[str, Any]:
        doc = self.scores.read_one(item=item)
        if doc is None:
            raise NotFoundError("Score for item {0} does not exist!", item)
        return as_dict(doc, "item", "score")

    def update(self, item: str, score: float) -> dict[str, Any]:
        doc = self.scores.read_one(item=item)
        if doc is None:
            raise NotFoundError("Score for item {0} does not exist!", item)
        doc = self.scores.update_one(doc.id, {"score": score})
        return {"msg": "Score updated!", "score": as_dict(doc, "item", "score")}
