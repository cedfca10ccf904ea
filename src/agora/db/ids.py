"""Identifier allocation shared by every concept.

All rows of all collections draw their primary key from :func:`new_id`, so an
id names at most one entity across the whole database. Polymorphic references
(a comment's parent, a reaction's item, a score's item) depend on this.
"""

from __future__ import annotations

import re
import uuid

from agora.core.errors import InvalidIdError

ID_LENGTH = 32
_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    """Return a fresh, globally unique identifier."""
    return uuid.uuid4().hex


def parse_id(raw: str) -> str:
    """Convert an external identifier into the storage representation.

    Accepts the canonical 32-character hex form as well as the dashed UUID
    form, case-insensitively.

    Raises:
        InvalidIdError: If ``raw`` is not a well-formed identifier.
    """
    candidate = raw.strip().lower().replace("-", "") if isinstance(raw, str) else ""
    if not _ID_PATTERN.match(candidate):
        raise InvalidIdError(str(raw))
    return candidate
