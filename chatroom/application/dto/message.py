"""Message DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from chatroom.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients. Serialized with wire names."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: str = Field(alias="from")
    to: str
    text: str
    kind: str
    sent_at: datetime = Field(alias="sentAt")

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            sender=message.sender.value,
            to=message.to,
            text=message.text,
            kind=message.kind.value,
            sent_at=message.sent_at,
        )
