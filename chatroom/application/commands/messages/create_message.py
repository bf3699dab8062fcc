"""
Create Message Command.

The store assigns id and sentAt. Regular messages need a sender that is
registered right now; status notices are written by the join flow and the
sweeper, where the sender may already be gone.
"""

from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.domain.entities.message import Message
from chatroom.domain.exceptions import EntityNotFoundError
from chatroom.domain.ports.repositories import MessageRepository, ParticipantRepository
from chatroom.domain.value_objects.message_kind import MessageKind
from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass(frozen=True)
class CreateMessageCommand(Command[Message]):
    sender: ParticipantName
    to: str
    text: str
    kind: MessageKind | str


class CreateMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        message_repository: MessageRepository,
        participant_repository: ParticipantRepository,
    ):
        self._message_repository = message_repository
        self._participant_repository = participant_repository

    async def execute(self, command: CreateMessageCommand) -> Message:
        message = Message.create(
            sender=command.sender,
            to=command.to,
            text=command.text,
            kind=command.kind,
        )

        if message.kind is not MessageKind.STATUS:
            if not await self._participant_repository.get(command.sender):
                raise EntityNotFoundError(
                    f"Participant {command.sender.value} not found"
                )

        await self._message_repository.add(message)
        return message
