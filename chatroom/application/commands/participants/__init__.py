"""Participant (presence) commands."""

from .join_participant import JoinParticipantCommand, JoinParticipantHandler
from .heartbeat import HeartbeatCommand, HeartbeatHandler
from .evict_expired import EvictExpiredCommand, EvictExpiredHandler

__all__ = [
    "JoinParticipantCommand",
    "JoinParticipantHandler",
    "HeartbeatCommand",
    "HeartbeatHandler",
    "EvictExpiredCommand",
    "EvictExpiredHandler",
]
