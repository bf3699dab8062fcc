"""
EntityNotFoundError - Raised when a participant or message does not exist.
Maps to: HTTP 404 Not Found
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind


class EntityNotFoundError(ChatError):
    """Exception raised when a requested entity is not found."""

    kind = ErrorKind.NOT_FOUND
    default_message = "The requested entity was not found."
