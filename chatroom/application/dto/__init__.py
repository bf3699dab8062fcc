"""Data Transfer Objects for the HTTP API."""

from chatroom.application.dto.participant import ParticipantDTO
from chatroom.application.dto.message import MessageDTO

__all__ = [
    "ParticipantDTO",
    "MessageDTO",
]
