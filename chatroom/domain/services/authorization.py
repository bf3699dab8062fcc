"""
Ownership checks for message mutations.

Only the author of a message may edit or delete it. Identity is the
self-asserted participant name carried by the request.
"""

from chatroom.domain.entities.message import Message
from chatroom.domain.exceptions import UnauthorizedError
from chatroom.domain.value_objects.participant_name import ParticipantName


def is_owner(message: Message, requester: ParticipantName) -> bool:
    return message.sender == requester


def ensure_owner(message: Message, requester: ParticipantName) -> None:
    """Raise UnauthorizedError unless ``requester`` wrote ``message``."""
    if not is_owner(message, requester):
        raise UnauthorizedError(
            f"{requester.value} is not the author of message {message.id.value}"
        )
