"""
UnauthorizedError - Raised when the requester is not the message author.
Maps to: HTTP 401 Unauthorized
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind


class UnauthorizedError(ChatError):
    """Raised when a participant tries to change someone else's message"""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Not the author of this message"
