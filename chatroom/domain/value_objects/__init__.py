"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass or enum)
- Validates itself on creation
"""

from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.message_kind import MessageKind

__all__ = [
    "ParticipantName",
    "MessageId",
    "MessageKind",
]
