"""
InternalError - Store or collaborator failure not otherwise classified.
Maps to: HTTP 500 Internal Server Error
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind


class InternalError(ChatError):
    kind = ErrorKind.INTERNAL
    default_message = "Internal server error"
