"""In-process notifications emitted after a primary write commits.

Handlers run after the publisher's own write has been committed, so they
always see a durable id. A failing handler is logged and does not affect the
publisher or the remaining handlers.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from agora.concepts import ScoringConcept

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


@dataclass(frozen=True)
class ItemCreated:
    """A user, post or comment was created and committed."""

    kind: str
    item_id: str


class EventBus:
    """Dispatch events to the handlers subscribed to their type."""

    def __init__(self) -> None:
        self.subscriptions: dict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> None:
        self.subscriptions[event_type].append(handler)
        logger.debug("Subscribed %r to %s", handler, event_type.__name__)

    def publish(self, event: Any) -> int:
        """Run every handler for ``event``; return how many succeeded."""
        succeeded = 0
        for handler in list(self.subscriptions.get(type(event), ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %r failed for %r", handler, event)
                continue
            succeeded += 1
        return succeeded


class ScoreFanout:
    """Create the initial score record for every newly created item."""

    def __init__(self, scoring: ScoringConcept, db: Session, initial_score: float = 0.0) -> None:
        self.scoring = scoring
        self.db = db
        self.initial_score = initial_score

    def __call__(self, event: ItemCreated) -> None:
        try:
            self.scoring.create(event.item_id, self.initial_score)
        except Exception:
            self.db.rollback()
            raise
        logger.debug("Created score for %s %s", event.kind, event.item_id)

    def __repr__(self) -> str:
        return f"ScoreFanout(initial_score={self.initial_score})"
