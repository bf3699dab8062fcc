"""Participant DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from chatroom.domain.entities.participant import Participant


class ParticipantDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    last_seen_at: datetime = Field(alias="lastSeenAt")

    @classmethod
    def from_entity(cls, participant: Participant) -> "ParticipantDTO":
        return cls(
            id=participant.id,
            name=participant.name.value,
            last_seen_at=participant.last_seen_at,
        )
