"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port is an abstract base class. The Redis implementations
live in chatroom/infrastructure/persistence/.
"""

from chatroom.domain.ports.repositories.participant_repository import ParticipantRepository
from chatroom.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "ParticipantRepository",
    "MessageRepository",
]
