"""Participant queries."""

from chatroom.application.queries.participants.list_participants import (
    ListParticipantsQuery,
    ListParticipantsHandler,
)

__all__ = [
    "ListParticipantsQuery",
    "ListParticipantsHandler",
]
