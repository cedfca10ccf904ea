# src/agora/api/v1/endpoints/friends.py
"""Friendship and friend-request endpoints.

Friends are addressed by username. A request moves from pending to
accepted, rejected or withdrawn; only an accepted request creates a
friendship.
"""

from typing import Any

from fastapi import APIRouter, status

from ..dependencies import SessionHandleDep, SyncDep

router = APIRouter(tags=["friends"])


@router.get("/friends")
async def list_friends(session: SessionHandleDep, sync: SyncDep) -> list[str]:
    """Return the usernames of the current user's friends."""
    return sync.get_friends(session)


@router.delete("/friends/{friend}")
async def remove_friend(friend: str, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """End a friendship with ``friend``.

    Raises:
        FriendNotFoundError: If the two users are not friends
    """
    return sync.remove_friend(session, friend)


@router.get("/friend/requests")
async def list_friend_requests(session: SessionHandleDep, sync: SyncDep) -> list[dict[str, Any]]:
    """Return requests sent or received by the current user, newest first."""
    return sync.get_friend_requests(session)


@router.post("/friend/requests/{to}", status_code=status.HTTP_201_CREATED)
async def send_friend_request(to: str, session: SessionHandleDep, sync: SyncDep) -> dict[str, str]:
    """Ask ``to`` to become friends.

    Args:
        to: Username of the recipient
        session: Session handle of the sender
        sync: Synchronizations bound to this request

    Returns:
        Confirmation message

    Raises:
        NotAllowedError: If the sender addresses themself
        InvalidStateError: If the users are friends or a request is pending
    """
    return sync.send_friend_request(session, to)


@router.delete("/friend/requests/{to}")
async def remove_friend_request(
    to: str, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Withdraw a pending request sent to ``to``."""
    return sync.remove_friend_request(session, to)


@router.put("/friend/accept/{from_user}")
async def accept_friend_request(
    from_user: str, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Accept the pending request from ``from_user`` and become friends.

    Raises:
        FriendRequestNotFoundError: If no request from ``from_user`` is pending
    """
    return sync.accept_friend_request(session, from_user)


@router.put("/friend/reject/{from_user}")
async def reject_friend_request(
    from_user: str, session: SessionHandleDep, sync: SyncDep
) -> dict[str, str]:
    """Reject the pending request from ``from_user``."""
    return sync.reject_friend_request(session, from_user)
