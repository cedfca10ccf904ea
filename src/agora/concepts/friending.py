"""Friending concept: friend requests and the friendships they produce.

A request between two users moves through ``none -> pending`` and then,
exactly once, to ``accepted`` or ``rejected``. Removing a pending request
returns the pair to ``none``. Accepted and rejected requests stay in the
collection as history; only pending rows take part in the state checks.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from agora.core.errors import InvalidStateError, NotAllowedError, NotFoundError
from agora.models import FriendRequest, Friendship
from agora.models.friend import (
    FRIEND_REQUEST_ACCEPTED,
    FRIEND_REQUEST_PENDING,
    FRIEND_REQUEST_REJECTED,
)

from .base import DocCollection, as_dict

logger = logging.getLogger(__name__)


class FriendRequestAlreadyExistsError(InvalidStateError):
    def __init__(self, from_user: str, to_user: str) -> None:
        self.from_user = from_user
        self.to_user = to_user
        super().__init__("Friend request between {0} and {1} already exists!", from_user, to_user)


class FriendRequestNotFoundError(InvalidStateError):
    def __init__(self, from_user: str, to_user: str) -> None:
        self.from_user = from_user
        self.to_user = to_user
        super().__init__("Pending friend request from {0} to {1} does not exist!", from_user, to_user)


class AlreadyFriendsError(InvalidStateError):
    def __init__(self, user1: str, user2: str) -> None:
        self.user1 = user1
        self.user2 = user2
        super().__init__("{0} and {1} are already friends!", user1, user2)


class FriendNotFoundError(NotFoundError):
    def __init__(self, user1: str, user2: str) -> None:
        self.user1 = user1
        self.user2 = user2
        super().__init__("Friendship between {0} and {1} not found!", user1, user2)


def _canonical(user1: str, user2: str) -> tuple[str, str]:
    return (user1, user2) if user1 < user2 else (user2, user1)


class FriendingConcept:
    """concept: Friending [User]"""

    def __init__(self, session: Session) -> None:
        self.friends = DocCollection(session, Friendship)
        self.requests = DocCollection(session, FriendRequest)

    def get_requests(self, user: str) -> list[dict[str, Any]]:
        """Return every request sent or received by ``user``, including history."""
        docs = self.requests.read_many(
            or_(FriendRequest.from_user == user, FriendRequest.to_user == user),
            newest_first=True,
        )
        return [as_dict(doc, "from_user", "to_user", "status") for doc in docs]

    def send_request(self, from_user: str, to_user: str) -> dict[str, str]:
        """Open a pending request from ``from_user`` to ``to_user``.

        Raises:
            NotAllowedError: If both ids name the same user.
            AlreadyFriendsError: If the pair is already friends.
            FriendRequestAlreadyExistsError: If a request is pending in either direction.
        """
        if from_user == to_user:
            raise NotAllowedError("Cannot send a friend request to yourself!")
        self.assert_not_friends(from_user, to_user)
        self._assert_no_pending(from_user, to_user)
        self.requests.create_one(
            from_user=from_user,
            to_user=to_user,
            status=FRIEND_REQUEST_PENDING,
        )
        logger.info("Friend request %s -> %s pending", from_user, to_user)
        return {"msg": "Sent request!"}

    def remove_request(self, from_user: str, to_user: str) -> dict[str, str]:
        self._consume_pending(from_user, to_user)
        return {"msg": "Removed request!"}

    def accept_request(self, from_user: str, to_user: str) -> dict[str, str]:
        """Accept the pending request and store the friendship."""
        self._consume_pending(from_user, to_user)
        self.requests.create_one(
            from_user=from_user,
            to_user=to_user,
            status=FRIEND_REQUEST_ACCEPTED,
        )
        self._add_friend(from_user, to_user)
        logger.info("Friend request %s -> %s accepted", from_user, to_user)
        return {"msg": "Accepted request!"}

    def reject_request(self, from_user: str, to_user: str) -> dict[str, str]:
        self._consume_pending(from_user, to_user)
        self.requests.create_one(
            from_user=from_user,
            to_user=to_user,
            status=FRIEND_REQUEST_REJECTED,
        )
        logger.info("Friend request %s -> %s rejected", from_user, to_user)
        return {"msg": "Rejected request!"}

    def remove_friend(self, user: str, friend: str) -> dict[str, str]:
        user1, user2 = _canonical(user, friend)
        if not self.friends.delete_one(user1=user1, user2=user2):
            raise FriendNotFoundError(user, friend)
        return {"msg": "Unfriended!"}

    def get_friends(self, user: str) -> list[str]:
        """Return the ids of everyone ``user`` is friends with."""
        docs = self.friends.read_many(or_(Friendship.user1 == user, Friendship.user2 == user))
        return [doc.user2 if doc.user1 == user else doc.user1 for doc in docs]

    def are_friends(self, user1: str, user2: str) -> bool:
        first, second = _canonical(user1, user2)
        return self.friends.read_one(user1=first, user2=second) is not None

    def assert_not_friends(self, user1: str, user2: str) -> None:
        if self.are_friends(user1, user2):
            raise AlreadyFriendsError(user1, user2)

    def _add_friend(self, user1: str, user2: str) -> None:
        first, second = _canonical(user1, user2)
        self.friends.create_one(user1=first, user2=second)

    def _assert_no_pending(self, user1: str, user2: str) -> None:
        pending = self.requests.read_one(
            or_(
                and_(FriendRequest.from_user == user1, FriendRequest.to_user == user2),
                and_(FriendRequest.from_user == user2, FriendRequest.to_user == user1),
            ),
            status=FRIEND_REQUEST_PENDING,
        )
        if pending is not None:
            raise FriendRequestAlreadyExistsError(user1, user2)

    def _consume_pending(self, from_user: str, to_user: str) -> None:
        removed = self.requests.delete_one(
            from_user=from_user,
            to_user=to_user,
            status=FRIEND_REQUEST_PENDING,
        )
        if not removed:
            raise FriendRequestNotFoundError(from_user, to_user)
