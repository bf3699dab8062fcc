"""Delete Message Command."""

from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.domain.exceptions import EntityNotFoundError
from chatroom.domain.ports.repositories import MessageRepository
from chatroom.domain.services.authorization import ensure_owner
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass(frozen=True)
class DeleteMessageCommand(Command[None]):
    message_id: MessageId
    requester: ParticipantName


class DeleteMessageHandler(CommandHandler[None]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: DeleteMessageCommand) -> None:
        message_id = command.message_id

        message = await self._message_repository.get_by_id(message_id)
        if not message:
            raise EntityNotFoundError(f"Message {message_id.value} not found")

        ensure_owner(message, command.requester)

        if not await self._message_repository.delete(message_id):
            raise EntityNotFoundError(f"Message {message_id.value} not found")
