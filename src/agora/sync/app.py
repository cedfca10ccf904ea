"""Composition of the concepts that make up the app.

Every request gets its own set of concept instances sharing one database
session; the concepts themselves hold no other state.
"""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from agora.concepts import (
    AuthenticatingConcept,
    CommentingConcept,
    FollowingConcept,
    FriendingConcept,
    PostingConcept,
    ReactingConcept,
    ScoringConcept,
    SessioningConcept,
)


@dataclass(frozen=True)
class Concepts:
    """The concept instances bound to one database session."""

    db: Session
    authing: AuthenticatingConcept
    sessioning: SessioningConcept
    posting: PostingConcept
    commenting: CommentingConcept
    reacting: ReactingConcept
    following: FollowingConcept
    friending: FriendingConcept
    scoring: ScoringConcept


def build_concepts(db: Session) -> Concepts:
    """Instantiate every concept over ``db``."""
    return Concepts(
        db=db,
        authing=AuthenticatingConcept(db),
        sessioning=SessioningConcept(db),
        posting=PostingConcept(db),
        commenting=CommentingConcept(db),
        reacting=ReactingConcept(db),
        following=FollowingConcept(db),
        friending=FriendingConcept(db),
        scoring=ScoringConcept(db),
    )
