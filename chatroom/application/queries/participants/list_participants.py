"""List Participants Query."""

from dataclasses import dataclass

from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.domain.entities.participant import Participant
from chatroom.domain.ports.repositories import ParticipantRepository


@dataclass(frozen=True)
class ListParticipantsQuery(Query[list[Participant]]):
    pass


class ListParticipantsHandler(QueryHandler[list[Participant]]):
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def execute(self, query: ListParticipantsQuery) -> list[Participant]:
        return await self._participant_repository.list_all()
