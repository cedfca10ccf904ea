"""Resolution of polymorphic parent references.

Comments and reactions point at a parent item that may be a post or a
comment. The content concepts do not know each other's schemas, so the
reference is resolved by probing candidate concepts in a fixed order and
taking the first one that recognises the id. Ids are allocated globally
(see :mod:`agora.db.ids`), so at most one probe can succeed and the order
only decides which concept is asked first.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from agora.core.errors import NotFoundError, ParentNotFoundError

logger = logging.getLogger(__name__)

POST = "Post"
COMMENT = "Comment"


@dataclass(frozen=True)
class Probe:
    """Existence check against one candidate concept."""

    kind: str
    assert_exists: Callable[[str], None]


class ParentResolver:
    """Resolve a raw id to the kind of item it names."""

    def __init__(self, probes: Sequence[Probe]) -> None:
        if not probes:
            raise ValueError("ParentResolver needs at least one probe")
        self.probes = tuple(probes)

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(probe.kind for probe in self.probes)

    def resolve(self, item_id: str) -> str:
        """Return the kind of the first candidate that recognises ``item_id``.

        A probe's :class:`NotFoundError` means "try the next candidate"; any
        other failure propagates unchanged.

        Raises:
            ParentNotFoundError: If no candidate recognises the id.
        """
        for probe in self.probes:
            try:
                probe.assert_exists(item_id)
            except NotFoundError:
                continue
            return probe.kind
        logger.debug("No candidate among %s recognises %s", self.kinds, item_id)
        raise ParentNotFoundError(item_id)
