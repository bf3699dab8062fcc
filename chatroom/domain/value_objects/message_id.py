"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chatroom.domain.exceptions import EntityNotFoundError


@dataclass(frozen=True)
class MessageId:
    value: str  # presented as UUID string

    def __post_init__(self):
        # An id that cannot exist in the store is reported as a missing message
        try:
            UUID(self.value)
        except (TypeError, ValueError, AttributeError):
            raise EntityNotFoundError(f"Message {self.value} not found")

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
