"""
Join Participant Command.

Registers a presence and records the join notice. The two writes are not a
single store transaction: if the notice cannot be recorded after retries the
participant insert is rolled back and the caller gets an InternalError, so a
successful join always has its notice.
"""

import logging
from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.services.status_announcer import StatusAnnouncer
from chatroom.config.settings import Config
from chatroom.domain.entities.participant import Participant
from chatroom.domain.exceptions import ConflictError, InternalError
from chatroom.domain.ports.repositories import ParticipantRepository
from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.observability.metrics import increment_participants_joined

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinParticipantCommand(Command[Participant]):
    name: ParticipantName


class JoinParticipantHandler(CommandHandler[Participant]):
    def __init__(
        self,
        participant_repository: ParticipantRepository,
        announcer: StatusAnnouncer,
        join_text: str = Config.JOIN_NOTICE_TEXT,
    ):
        self._participant_repository = participant_repository
        self._announcer = announcer
        self._join_text = join_text

    async def execute(self, command: JoinParticipantCommand) -> Participant:
        participant = Participant.create(command.name)
        if not await self._participant_repository.add(participant):
            raise ConflictError(f"Participant {command.name.value} already exists")

        try:
            await self._announcer.announce(command.name, self._join_text)
        except Exception as e:
            logger.error(
                f"[Join] Notice for {command.name.value} failed, rolling back: {e}",
                exc_info=True,
            )
            await self._participant_repository.remove(command.name)
            raise InternalError("Could not complete join") from e

        increment_participants_joined()
        logger.info(f"[Join] {command.name.value} joined")
        return participant
