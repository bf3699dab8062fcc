"""
StatusAnnouncer - records join/leave notices.

A notice is the second write of a two-step flow (insert participant then
announce, or evict then announce). It is retried with exponential backoff so
a transient store error does not drop it. The message is built once, so every
attempt writes the same id and a retry after a partial write cannot produce a
second notice.
"""

import logging

from tenacity import AsyncRetrying, before_sleep_log, stop_after_attempt, wait_exponential

from chatroom.config.settings import Config
from chatroom.domain.entities.message import BROADCAST_TARGET, Message
from chatroom.domain.ports.repositories import MessageRepository
from chatroom.domain.value_objects.participant_name import ParticipantName

logger = logging.getLogger(__name__)


class StatusAnnouncer:
    def __init__(
        self,
        message_repository: MessageRepository,
        attempts: int = Config.ANNOUNCE_RETRY_ATTEMPTS,
        wait_seconds: float = Config.ANNOUNCE_RETRY_WAIT_SECONDS,
    ):
        self._message_repository = message_repository
        self._attempts = max(1, attempts)
        self._wait_seconds = wait_seconds

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=wait_exponential(
                multiplier=self._wait_seconds, max=self._wait_seconds * 4
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def build(self, name: ParticipantName, text: str) -> Message:
        return Message.status(sender=name, text=text)

    async def record(self, notice: Message) -> Message:
        """
        Write an already built notice. Writing the same notice again overwrites
        it, so callers may keep it and retry later. Raises after the last attempt.
        """
        async for attempt in self._retrying():
            with attempt:
                await self._message_repository.add(notice)
        logger.debug(
            f"[Announce] {notice.sender.value} -> {BROADCAST_TARGET}: {notice.text}"
        )
        return notice

    async def announce(self, name: ParticipantName, text: str) -> Message:
        """Write a status notice from ``name`` to everyone. Raises after the last attempt."""
        return await self.record(self.build(name, text))
