"""Concepts: independently owned domain modules, one collection each.

Concepts never import each other; cross-concept behaviour lives in
:mod:`agora.sync`.
"""

from .authenticating import AuthenticatingConcept
from .commenting import CommentingConcept
from .following import FollowingConcept
from .friending import FriendingConcept
from .posting import PostingConcept
from .reacting import ReactingConcept
from .scoring import ScoringConcept
from .sessioning import SessioningConcept

__all__ = [
    "AuthenticatingConcept",
    "CommentingConcept",
    "FollowingConcept",
    "FriendingConcept",
    "PostingConcept",
    "ReactingConcept",
    "ScoringConcept",
    "SessioningConcept",
]
