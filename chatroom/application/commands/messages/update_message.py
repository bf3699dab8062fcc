"""Update Message Command."""

from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.domain.entities.message import Message
from chatroom.domain.exceptions import EntityNotFoundError
from chatroom.domain.ports.repositories import MessageRepository, ParticipantRepository
from chatroom.domain.services.authorization import ensure_owner
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.message_kind import MessageKind
from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass(frozen=True)
class UpdateMessageCommand(Command[Message]):
    message_id: MessageId
    requester: ParticipantName
    to: str
    text: str
    kind: MessageKind | str


class UpdateMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        message_repository: MessageRepository,
        participant_repository: ParticipantRepository,
    ):
        self._message_repository = message_repository
        self._participant_repository = participant_repository

    async def execute(self, command: UpdateMessageCommand) -> Message:
        if not await self._participant_repository.get(command.requester):
            raise EntityNotFoundError(
                f"Participant {command.requester.value} not found"
            )

        message = await self._message_repository.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError(f"Message {command.message_id.value} not found")

        ensure_owner(message, command.requester)

        message.edit(to=command.to, text=command.text, kind=command.kind)
        # Deleted between read and write: do not bring it back
        if not await self._message_repository.replace(message):
            raise EntityNotFoundError(f"Message {command.message_id.value} not found")

        return message
