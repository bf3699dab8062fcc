"""
Redis Participant Repository Implementation.

Storage layout:
    {prefix}:participants   HASH  name -> JSON document {id, name, lastSeenAt}

Uniqueness of names is enforced by the store itself: HSETNX inserts the
document only if no field with that name exists, in a single command.

Check-then-act operations (heartbeat, conditional eviction) run as
WATCH/MULTI/EXEC transactions. If another client changes the hash between
the read and the write, EXEC is aborted and redis-py re-runs the callable,
so a heartbeat never recreates an evicted participant and an eviction never
removes a participant that was just refreshed.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from redis.asyncio import Redis
from redis.asyncio.client import Pipeline

from chatroom.config.settings import Config
from chatroom.domain.entities.participant import Participant
from chatroom.domain.ports.repositories.participant_repository import (
    ParticipantRepository,
)
from chatroom.domain.value_objects.participant_name import ParticipantName

logger = logging.getLogger(__name__)


class RedisParticipantRepository(ParticipantRepository):
    """Redis implementation of ParticipantRepository."""

    _redis: Redis

    def __init__(self, redis: Redis, key_prefix: str = Config.REDIS_KEY_PREFIX):
        """
        Args:
            redis: Connected async Redis client (injected by DI container)
            key_prefix: Namespace for every key this repository touches
        """
        self._redis = redis
        self._key = f"{key_prefix}:participants"

    def _to_document(self, participant: Participant) -> str:
        return json.dumps(
            {
                "id": participant.id,
                "name": participant.name.value,
                "lastSeenAt": participant.last_seen_at.isoformat(),
            }
        )

    def _to_entity(self, raw: str) -> Participant:
        d = json.loads(raw)
        return Participant(
            id=d["id"],
            name=ParticipantName(d["name"]),
            last_seen_at=datetime.fromisoformat(d["lastSeenAt"]),
        )

    async def add(self, participant: Participant) -> bool:
        added = await self._redis.hsetnx(
            self._key, participant.name.value, self._to_document(participant)
        )
        if added:
            logger.debug(f"[Participants] Inserted {participant.name.value}")
        return bool(added)

    async def get(self, name: ParticipantName) -> Optional[Participant]:
        raw = await self._redis.hget(self._key, name.value)
        return self._to_entity(raw) if raw else None

    async def list_all(self) -> list[Participant]:
        documents = await self._redis.hgetall(self._key)
        return [self._to_entity(raw) for raw in documents.values()]

    async def touch(self, name: ParticipantName, seen_at: datetime) -> bool:
        async def _touch(pipe: Pipeline) -> bool:
            raw = await pipe.hget(self._key, name.value)
            if raw is None:
                return False
            participant = self._to_entity(raw)
            participant.touch(seen_at)
            pipe.multi()
            pipe.hset(self._key, name.value, self._to_document(participant))
            return True

        return await self._redis.transaction(
            _touch, self._key, value_from_callable=True
        )

    async def remove(self, name: ParticipantName) -> bool:
        removed = await self._redis.hdel(self._key, name.value)
        return bool(removed)

    async def remove_if_inactive(
        self, name: ParticipantName, cutoff: datetime
    ) -> Optional[Participant]:
        async def _remove(pipe: Pipeline) -> Optional[Participant]:
            raw = await pipe.hget(self._key, name.value)
            if raw is None:
                return None
            participant = self._to_entity(raw)
            if participant.last_seen_at >= cutoff:
                logger.debug(
                    f"[Participants] {name.value} was refreshed, keeping it"
                )
                return None
            pipe.multi()
            pipe.hdel(self._key, name.value)
            return participant

        return await self._redis.transaction(
            _remove, self._key, value_from_callable=True
        )
