"""Authorization checks for author-owned content."""
from __future__ import annotations

from collections.abc import Mapping

from agora.concepts.content import OwnedContent


class OwnershipGuard:
    """Single entry point for "does this item exist and did this user write it"."""

    def __init__(self, owners: Mapping[str, OwnedContent]) -> None:
        self.owners = dict(owners)

    def assert_owner(self, kind: str, _id: str, user: str) -> None:
        """Check ownership of item ``_id`` of the given kind.

        Raises:
            KeyError: If ``kind`` is not a registered content kind.
            NotFoundError: If the item does not exist.
            NotAuthorError: If ``user`` is not the item's author.
        """
        self.owners[kind].assert_author_is_user(_id, user)
