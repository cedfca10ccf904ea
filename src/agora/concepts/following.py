"""Following concept: directed follow edges between users."""
from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from agora.core.errors import NotAllowedError, NotFoundError
from agora.models import Follow

from .base import DocCollection, as_dict


class AlreadyFollowingError(NotAllowedError):
    def __init__(self, follower: str, followee: str) -> None:
        self.follower = follower
        self.followee = followee
        super().__init__("{0} already follows {1}!", follower, followee)


class NotFollowingError(NotFoundError):
    def __init__(self, follower: str, followee: str) -> None:
        self.follower = follower
        self.followee = followee
        super().__init__("{0} does not follow {1}!", follower, followee)


class FollowingConcept:
    """concept: Following [User]"""

    def __init__(self, session: Session) -> None:
        self.follows = DocCollection(session, Follow)

    def follow(self, follower: str, followee: str) -> dict[str, str]:
        if follower == followee:
            raise NotAllowedError("Users cannot follow themselves!")
        if self.follows.read_one(follower=follower, followee=followee) is not None:
            raise AlreadyFollowingError(follower, followee)
        self.follows.create_one(follower=follower, followee=followee)
        return {"msg": "Followed!"}

    def unfollow(self, follower: str, followee: str) -> dict[str, str]:
        if not self.follows.delete_one(follower=follower, followee=followee):
            raise NotFollowingError(follower, followee)
        return {"msg": "Unfollowed!"}

    def get_followers(self, user: str) -> list[dict[str, Any]]:
        return [as_dict(doc, "follower", "followee") for doc in self.follows.read_many(followee=user)]

    def get_following(self, user: str) -> list[dict[str, Any]]:
        return [as_dict(doc, "follower", "followee") for doc in self.follows.read_many(follower=user)]

    def is_following(self, follower: str, followee: str) -> bool:
        return self.follows.read_one(follower=follower, followee=followee) is not None
