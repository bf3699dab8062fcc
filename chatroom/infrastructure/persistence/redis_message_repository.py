"""
Redis Message Repository Implementation.

Storage layout:
    {prefix}:messages            HASH  id -> JSON document {id, from, to, text, kind, sentAt}
    {prefix}:messages:timeline   ZSET  id scored by creation sequence
    {prefix}:messages:seq        STRING counter used as the creation sequence

The timeline keeps creation order even when an edit refreshes sentAt.
Document and timeline entry are written together in one MULTI/EXEC.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from redis.asyncio import Redis
from redis.asyncio.client import Pipeline

from chatroom.config.settings import Config
from chatroom.domain.entities.message import Message
from chatroom.domain.ports.repositories.message_repository import MessageRepository
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.message_kind import MessageKind
from chatroom.domain.value_objects.participant_name import ParticipantName

logger = logging.getLogger(__name__)


class RedisMessageRepository(MessageRepository):
    """Redis implementation of MessageRepository."""

    _redis: Redis

    def __init__(self, redis: Redis, key_prefix: str = Config.REDIS_KEY_PREFIX):
        self._redis = redis
        self._key = f"{key_prefix}:messages"
        self._timeline_key = f"{key_prefix}:messages:timeline"
        self._seq_key = f"{key_prefix}:messages:seq"

    def _to_document(self, message: Message) -> str:
        return json.dumps(
            {
                "id": message.id.value,
                "from": message.sender.value,
                "to": message.to,
                "text": message.text,
                "kind": message.kind.value,
                "sentAt": message.sent_at.isoformat(),
            }
        )

    def _to_entity(self, raw: str) -> Message:
        d = json.loads(raw)
        return Message(
            id=MessageId(d["id"]),
            sender=ParticipantName(d["from"]),
            to=d["to"],
            text=d["text"],
            kind=MessageKind(d["kind"]),
            sent_at=datetime.fromisoformat(d["sentAt"]),
        )

    async def add(self, message: Message) -> None:
        seq = await self._redis.incr(self._seq_key)
        pipe = self._redis.pipeline(transaction=True)
        pipe.hset(self._key, message.id.value, self._to_document(message))
        pipe.zadd(self._timeline_key, {message.id.value: seq})
        await pipe.execute()
        logger.debug(f"[Messages] Stored {message.kind.value} {message.id.value}")

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        raw = await self._redis.hget(self._key, message_id.value)
        return self._to_entity(raw) if raw else None

    async def list_chronological(self) -> list[Message]:
        ids = await self._redis.zrange(self._timeline_key, 0, -1)
        if not ids:
            return []
        documents = await self._redis.hmget(self._key, ids)
        # A document may vanish between the two reads (concurrent delete)
        return [self._to_entity(raw) for raw in documents if raw]

    async def replace(self, message: Message) -> bool:
        async def _replace(pipe: Pipeline) -> bool:
            exists = await pipe.hexists(self._key, message.id.value)
            if not exists:
                return False
            pipe.multi()
            pipe.hset(self._key, message.id.value, self._to_document(message))
            return True

        return await self._redis.transaction(
            _replace, self._key, value_from_callable=True
        )

    async def delete(self, message_id: MessageId) -> bool:
        pipe = self._redis.pipeline(transaction=True)
        pipe.hdel(self._key, message_id.value)
        pipe.zrem(self._timeline_key, message_id.value)
        removed, _ = await pipe.execute()
        return bool(removed)
