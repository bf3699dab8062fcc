"""
Participant Repository Port - Interface for the participants collection.
Implementation: chatroom/infrastructure/persistence/redis_participant_repository.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from chatroom.domain.entities.participant import Participant
from chatroom.domain.value_objects.participant_name import ParticipantName


class ParticipantRepository(ABC):
    @abstractmethod
    async def add(self, participant: Participant) -> bool:
        """Insert unless the name is taken. Returns False on a duplicate name."""
        ...

    @abstractmethod
    async def get(self, name: ParticipantName) -> Optional[Participant]: ...

    @abstractmethod
    async def list_all(self) -> list[Participant]: ...

    @abstractmethod
    async def touch(self, name: ParticipantName, seen_at: datetime) -> bool:
        """Refresh last_seen_at of an existing participant. False if absent."""
        ...

    @abstractmethod
    async def remove(self, name: ParticipantName) -> bool: ...

    @abstractmethod
    async def remove_if_inactive(
        self, name: ParticipantName, cutoff: datetime
    ) -> Optional[Participant]:
        """
        Delete the participant only if its last_seen_at is still before cutoff.
        Returns the deleted participant, or None if it was refreshed or gone.
        """
        ...
