"""
Evict Expired Command.

Removes every participant whose last heartbeat is older than ``now - ttl``
and returns exactly the participants that were removed. Each removal
re-checks staleness inside the store transaction, so a participant refreshed
after selection survives. A candidate whose removal fails is logged and left
in the store for the next sweep; the ones already removed are still returned.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.domain.entities.participant import Participant
from chatroom.domain.ports.repositories import ParticipantRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvictExpiredCommand(Command[list[Participant]]):
    now: datetime
    ttl: timedelta


class EvictExpiredHandler(CommandHandler[list[Participant]]):
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def execute(self, command: EvictExpiredCommand) -> list[Participant]:
        cutoff = command.now - command.ttl
        candidates = [
            p
            for p in await self._participant_repository.list_all()
            if p.is_expired(command.now, command.ttl)
        ]

        evicted = []
        for candidate in candidates:
            try:
                removed = await self._participant_repository.remove_if_inactive(
                    candidate.name, cutoff
                )
            except Exception as e:
                logger.error(
                    f"[Evict] Could not remove {candidate.name.value}: {e}",
                    exc_info=True,
                )
                continue
            if removed:
                evicted.append(removed)

        if evicted:
            logger.info(
                f"[Evict] Removed {len(evicted)} inactive participant(s): "
                f"{', '.join(p.name.value for p in evicted)}"
            )
        return evicted
