"""Response shaping: replace stored user ids with usernames.

Concepts only ever store ids. Clients want names, so every read that leaves
the app goes through :class:`Responses`, which asks Authenticating for the
usernames in one batch per response.
"""
from __future__ import annotations

from typing import Any

from agora.concepts import AuthenticatingConcept
from agora.core.errors import AgoraError, NotAuthorError


class Responses:
    def __init__(self, authing: AuthenticatingConcept) -> None:
        self.authing = authing

    def _with_usernames(self, docs: list[dict[str, Any]], *fields: str) -> list[dict[str, Any]]:
        if not docs:
            return []
        ids = [doc[field] for doc in docs for field in fields]
        names = iter(self.authing.ids_to_usernames(ids))
        shaped = []
        for doc in docs:
            copy = dict(doc)
            for field in fields:
                copy[field] = next(names)
            shaped.append(copy)
        return shaped

    def post(self, post: dict[str, Any]) -> dict[str, Any]:
        return self._with_usernames([post], "author")[0]

    def posts(self, posts: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._with_usernames(posts, "author")

    def comment(self, comment: dict[str, Any]) -> dict[str, Any]:
        return self._with_usernames([comment], "author")[0]

    def comments(self, comments: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._with_usernames(comments, "author")

    def reaction(self, reaction: dict[str, Any]) -> dict[str, Any]:
        return self._with_usernames([reaction], "author")[0]

    def reactions(self, reactions: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._with_usernames(reactions, "author")

    def friend_requests(self, requests: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._with_usernames(requests, "from_user", "to_user")

    def follows(self, follows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._with_usernames(follows, "follower", "followee")

    def error_message(self, error: AgoraError) -> str:
        """Render ``error`` for clients, naming authors by username."""
        if isinstance(error, NotAuthorError):
            username = self.authing.ids_to_usernames([error.author])[0]
            return error.format_with(username, error._id)
        return error.formatted()
