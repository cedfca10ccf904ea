"""Error taxonomy shared by concepts and synchronizations.

Every failure raised by a concept carries a message template with positional
placeholders (``{0}``, ``{1}``...) and the values that fill them. Keeping the
raw values around lets the response layer re-render a message with friendlier
substitutions (for example a username instead of a user id).
"""

from __future__ import annotations

from typing import Any

from fastapi import status


class AgoraError(Exception):
    """Base class for all expected, user-visible failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "Error"

    def __init__(self, message: str, *args: Any) -> None:
        self.message = message
        self.args_ = args
        super().__init__(self.formatted())

    def format_with(self, *args: Any) -> str:
        """Render the message template using ``args`` instead of the stored values."""
        return self.message.format(*(str(arg) for arg in args))

    def formatted(self) -> str:
        """Render the message template with the values captured at raise time."""
        return self.format_with(*self.args_)


class BadValuesError(AgoraError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "BadValues"


class InvalidIdError(BadValuesError):
    """Raised when an external identifier cannot be converted to a storage id."""

    kind = "InvalidId"

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("{0} is not a valid id!", raw)


class UnauthenticatedError(AgoraError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "Unauthenticated"


class InvalidCredentialsError(UnauthenticatedError):
    kind = "InvalidCredentials"

    def __init__(self) -> None:
        super().__init__("Username or password is incorrect.")


class NotAllowedError(AgoraError):
    status_code = status.HTTP_403_FORBIDDEN
    kind = "NotAllowed"


class NotAuthorError(NotAllowedError):
    """The caller tried to mutate content they did not author."""

    kind = "NotAuthor"

    def __init__(self, author: str, _id: str, item_kind: str = "item") -> None:
        self.author = author
        self._id = _id
        self.item_kind = item_kind
        super().__init__("{0} is not the author of " + item_kind + " {1}!", author, _id)


class AlreadyLoggedInError(NotAllowedError):
    kind = "NotLoggedOut"

    def __init__(self) -> None:
        super().__init__("You must be logged out!")


class DuplicateUsernameError(NotAllowedError):
    status_code = status.HTTP_409_CONFLICT
    kind = "DuplicateUsername"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("This username ({0}) already exists!", username)


class NotFoundError(AgoraError):
    status_code = status.HTTP_404_NOT_FOUND
    kind = "NotFound"


class ParentNotFoundError(NotFoundError):
    """No candidate concept recognises the id given as a parent item."""

    kind = "ParentResolutionFailed"

    def __init__(self, parent: str) -> None:
        self.parent = parent
        super().__init__("Parent item {0} does not exist!", parent)


class InvalidStateError(AgoraError):
    """A state machine transition was attempted from the wrong state."""

    status_code = status.HTTP_409_CONFLICT
    kind = "InvalidState"
