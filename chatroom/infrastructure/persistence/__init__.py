"""
Persistence Layer - Document store implementations.

Contains Redis repository implementations for domain ports.
"""

from chatroom.infrastructure.persistence.redis_participant_repository import (
    RedisParticipantRepository,
)
from chatroom.infrastructure.persistence.redis_message_repository import (
    RedisMessageRepository,
)

__all__ = [
    "RedisParticipantRepository",
    "RedisMessageRepository",
]
