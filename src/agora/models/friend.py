# src/agora/models/friend.py
"""SQLAlchemy models for friendships and friend requests."""

from sqlalchemy import CheckConstraint, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agora.db.ids import ID_LENGTH

from .base import BaseDoc

FRIEND_REQUEST_PENDING = "pending"
FRIEND_REQUEST_ACCEPTED = "accepted"
FRIEND_REQUEST_REJECTED = "rejected"


class Friendship(BaseDoc):
    """Symmetric relationship stored once per unordered pair.

    The pair is kept in canonical order (``user1 < user2``) so the unique
    constraint covers both orderings.
    """

    __tablename__ = "friends"
    __table_args__ = (
        UniqueConstraint("user1", "user2", name="uq_friends_pair"),
        CheckConstraint("user1 < user2", name="ck_friends_canonical"),
    )

    user1: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    user2: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)


class FriendRequest(BaseDoc):
    """Request from ``from_user`` to ``to_user``.

    Pending rows are the live state; accepted and rejected rows are history.
    """

    __tablename__ = "friend_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_friend_requests_status",
        ),
        Index("ix_friend_requests_pair", "from_user", "to_user"),
    )

    from_user: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    to_user: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=FRIEND_REQUEST_PENDING
    )
