"""Heartbeat Command - keeps a participant's presence alive."""

from dataclasses import dataclass
from datetime import datetime, timezone

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.domain.exceptions import EntityNotFoundError
from chatroom.domain.ports.repositories import ParticipantRepository
from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass(frozen=True)
class HeartbeatCommand(Command[None]):
    name: ParticipantName


class HeartbeatHandler(CommandHandler[None]):
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def execute(self, command: HeartbeatCommand) -> None:
        touched = await self._participant_repository.touch(
            command.name, datetime.now(timezone.utc)
        )
        if not touched:
            raise EntityNotFoundError(f"Participant {command.name.value} not found")
