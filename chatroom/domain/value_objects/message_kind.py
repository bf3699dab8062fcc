"""
MessageKind - The three kinds of chat entries.
"""

from enum import Enum

from chatroom.domain.exceptions import DomainValidationError


class MessageKind(str, Enum):
    BROADCAST = "broadcast-message"
    PRIVATE = "private-message"
    STATUS = "status"  # join/leave notice, never posted by clients

    @classmethod
    def parse(cls, raw: "str | MessageKind") -> "MessageKind":
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(kind.value for kind in cls)
            raise DomainValidationError(
                f"Invalid message kind: {raw!r}. Must be one of: {allowed}"
            ) from None
