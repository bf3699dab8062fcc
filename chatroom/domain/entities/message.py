"""
Message Entity - A single chat entry.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from chatroom.domain.exceptions import DomainValidationError
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.message_kind import MessageKind
from chatroom.domain.value_objects.participant_name import ParticipantName

BROADCAST_TARGET = "Todos"


@dataclass
class Message:
    id: MessageId
    sender: ParticipantName  # "from" on the wire; immutable
    to: str
    text: str
    kind: MessageKind
    sent_at: datetime

    def __post_init__(self):
        self.kind = MessageKind.parse(self.kind)
        if not self.to or not self.to.strip():
            raise DomainValidationError("Message recipient cannot be empty")
        if self.kind is MessageKind.STATUS and self.to != BROADCAST_TARGET:
            raise DomainValidationError(
                f"Status messages must be addressed to {BROADCAST_TARGET}"
            )

    @classmethod
    def create(
        cls,
        sender: ParticipantName,
        to: str,
        text: str,
        kind: MessageKind | str,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            sender=sender,
            to=to,
            text=text,
            kind=kind,
            sent_at=datetime.now(timezone.utc),
        )

    @classmethod
    def status(cls, sender: ParticipantName, text: str) -> Message:
        return cls.create(sender=sender, to=BROADCAST_TARGET, text=text, kind=MessageKind.STATUS)

    def edit(self, to: str, text: str, kind: MessageKind | str) -> None:
        """Replace the editable fields. Authors cannot turn a message into a status notice."""
        kind = MessageKind.parse(kind)
        if kind is MessageKind.STATUS:
            raise DomainValidationError("Status messages cannot be created by editing")
        if not to or not to.strip():
            raise DomainValidationError("Message recipient cannot be empty")

        self.to = to
        self.text = text
        self.kind = kind
        self.sent_at = datetime.now(timezone.utc)

    def is_visible_to(self, user: ParticipantName) -> bool:
        return (
            self.sender == user
            or self.to == user.value
            or self.to == BROADCAST_TARGET
            or self.kind is MessageKind.BROADCAST
        )
