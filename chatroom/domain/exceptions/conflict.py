"""
ConflictError - Raised when a participant name is already taken.
Maps to: HTTP 409 Conflict
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind


class ConflictError(ChatError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"
