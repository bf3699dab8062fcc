"""
Participant Entity - A named presence in the chat room.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass
class Participant:
    id: str
    name: ParticipantName
    last_seen_at: datetime

    @classmethod
    def create(cls, name: ParticipantName, now: datetime | None = None) -> Participant:
        """Factory method to create a new Participant seen right now."""
        return cls(
            id=str(uuid4()),
            name=name,
            last_seen_at=now or datetime.now(timezone.utc),
        )

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        return self.last_seen_at < now - ttl

    def touch(self, now: datetime | None = None) -> None:
        self.last_seen_at = now or datetime.now(timezone.utc)
