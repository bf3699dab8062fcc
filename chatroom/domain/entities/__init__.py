"""
ENTITIES - Business objects with identity

Pure Python dataclasses (no ORM, no Pydantic).
"""

from chatroom.domain.entities.participant import Participant
from chatroom.domain.entities.message import Message, BROADCAST_TARGET

__all__ = [
    "Participant",
    "Message",
    "BROADCAST_TARGET",
]
