"""
ListVisibleMessages Query - the chat log as one participant sees it.

A message is visible to ``user`` when the user wrote it, it is addressed to
the user or to everyone, or it is a broadcast message. Private messages
between two other participants are never returned.
"""

from dataclasses import dataclass
from typing import Optional

from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.domain.entities.message import Message
from chatroom.domain.ports.repositories import MessageRepository
from chatroom.domain.value_objects.participant_name import ParticipantName


@dataclass(frozen=True)
class ListVisibleMessagesQuery(Query[list[Message]]):
    user: ParticipantName
    limit: Optional[int] = None


class ListVisibleMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListVisibleMessagesQuery) -> list[Message]:
        """
        Returns:
            Visible messages in creation order. With a positive limit only
            the most recent ``limit`` of them; otherwise all of them.
        """
        messages = await self._message_repository.list_chronological()
        visible = [m for m in messages if m.is_visible_to(query.user)]

        if query.limit and query.limit > 0:
            return visible[-query.limit :]
        return visible
