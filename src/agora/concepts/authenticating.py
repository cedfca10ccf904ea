"""Authenticating concept: user identities and credentials."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from agora.core import security
from agora.core.errors import (
    BadValuesError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from agora.models import User

from .base import DocCollection

logger = logging.getLogger(__name__)

DELETED_USER = "DELETED_USER"


def redact(user: User) -> dict[str, Any]:
    """Return the public view of ``user``; the password hash is never included."""
    return {
        "_id": user.id,
        "username": user.username,
        "dateCreated": user.created_at,
        "dateUpdated": user.updated_at,
    }


class AuthenticatingConcept:
    """concept: Authenticating"""

    def __init__(self, session: Session) -> None:
        self.users = DocCollection(session, User)

    def create(self, username: str, password: str) -> dict[str, Any]:
        """Register a new identity.

        Raises:
            BadValuesError: If the username or password is empty.
            DuplicateUsernameError: If the username is taken.
        """
        self._assert_good_credentials(username, password)
        self._assert_username_unique(username)
        user = self.users.create_one(
            username=username,
            password_hash=security.hash_password(password),
        )
        logger.info("Created user %s", user.id)
        return {"msg": "User created successfully!", "user": redact(user)}

    def get_user_by_id(self, _id: str) -> dict[str, Any]:
        user = self.users.read_one(id=_id)
        if user is None:
            raise NotFoundError("User not found!")
        return redact(user)

    def get_user_by_username(self, username: str) -> dict[str, Any]:
        user = self.users.read_one(username=username)
        if user is None:
            raise NotFoundError("User {0} not found!", username)
        return redact(user)

    def get_users(self, username: str | None = None) -> list[dict[str, Any]]:
        """List users, optionally restricted to one exact username."""
        if username:
            users = self.users.read_many(username=username)
        else:
            users = self.users.read_many()
        return [redact(user) for user in users]

    def ids_to_usernames(self, ids: Iterable[str]) -> list[str]:
        """Map user ids to usernames, keeping order; unknown ids become ``DELETED_USER``."""
        ids = list(ids)
        if not ids:
            return []
        found = self.users.read_many(User.id.in_(ids))
        by_id = {user.id: user.username for user in found}
        return [by_id.get(_id, DELETED_USER) for _id in ids]

    def authenticate(self, username: str, password: str) -> dict[str, Any]:
        """Return the identity matching the credentials.

        Raises:
            InvalidCredentialsError: On any mismatch; the message does not say
                which of username or password was wrong.
        """
        user = self.users.read_one(username=username)
        if user is None or not security.verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return {"msg": "Successfully authenticated.", "_id": user.id}

    def update_username(self, _id: str, username: str) -> dict[str, str]:
        if not username:
            raise BadValuesError("Username must be non-empty!")
        current = self.users.read_one(id=_id)
        if current is None:
            raise NotFoundError("User not found!")
        if current.username != username:
            self._assert_username_unique(username)
        self.users.update_one(_id, {"username": username})
        return {"msg": "Username updated successfully!"}

    def update_password(self, _id: str, current_password: str, new_password: str) -> dict[str, str]:
        if not new_password:
            raise BadValuesError("Password must be non-empty!")
        user = self.users.read_one(id=_id)
        if user is None:
            raise NotFoundError("User not found!")
        if not security.verify_password(current_password, user.password_hash):
            raise InvalidCredentialsError()
        self.users.update_one(_id, {"password_hash": security.hash_password(new_password)})
        return {"msg": "Password updated successfully!"}

    def delete(self, _id: str) -> dict[str, str]:
        self.users.delete_one(id=_id)
        logger.info("Deleted user %s", _id)
        return {"msg": "User deleted!"}

    @staticmethod
    def _assert_good_credentials(username: str, password: str) -> None:
        if not username or not password:
            raise BadValuesError("Username and password must be non-empty!")

    def _assert_username_unique(self, username: str) -> None:
        if self.users.read_one(username=username) is not None:
            raise DuplicateUsernameError(username)
