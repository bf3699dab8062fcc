"""
Dishka DI Container Setup.

- RedisProvider: the document store handle (one pooled client per app)
- AppProvider: repositories, handlers and the eviction sweeper

Scopes:
- Scope.APP = created once, shared by requests and the background sweeper
- Scope.REQUEST = new instance per HTTP request

Flow:
  Container → Redis → RedisParticipantRepository → JoinParticipantHandler
                              ↓
                  uses ParticipantRepository interface
"""

from typing import AsyncIterable

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer
from redis.asyncio import Redis

from chatroom.application.commands.messages import (
    CreateMessageHandler,
    DeleteMessageHandler,
    UpdateMessageHandler,
)
from chatroom.application.commands.participants import (
    EvictExpiredHandler,
    HeartbeatHandler,
    JoinParticipantHandler,
)
from chatroom.application.queries.messages import ListVisibleMessagesHandler
from chatroom.application.queries.participants import ListParticipantsHandler
from chatroom.application.services.eviction_sweeper import EvictionSweeper
from chatroom.application.services.status_announcer import StatusAnnouncer
from chatroom.config.settings import Config
from chatroom.domain.ports.repositories import MessageRepository, ParticipantRepository
from chatroom.infrastructure.persistence import (
    RedisMessageRepository,
    RedisParticipantRepository,
)
from chatroom.infrastructure.redis_client import close_redis_client, create_redis_client


class RedisProvider(Provider):
    """Provides the shared Redis client and closes it when the container closes."""

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client()
        yield client
        await close_redis_client(client)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations. The Redis client
    itself comes from a separate provider so tests can substitute it.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_participant_repository(self, redis: Redis) -> ParticipantRepository:
        """
        - Return type is ABSTRACT (ParticipantRepository)
        - Implementation is CONCRETE (RedisParticipantRepository)
        """
        return RedisParticipantRepository(redis, key_prefix=self._config.REDIS_KEY_PREFIX)

    @provide(scope=Scope.APP)
    def get_message_repository(self, redis: Redis) -> MessageRepository:
        return RedisMessageRepository(redis, key_prefix=self._config.REDIS_KEY_PREFIX)

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_status_announcer(self, message_repository: MessageRepository) -> StatusAnnouncer:
        return StatusAnnouncer(
            message_repository,
            attempts=self._config.ANNOUNCE_RETRY_ATTEMPTS,
            wait_seconds=self._config.ANNOUNCE_RETRY_WAIT_SECONDS,
        )

    @provide(scope=Scope.APP)
    def get_evict_expired_handler(
        self, participant_repository: ParticipantRepository
    ) -> EvictExpiredHandler:
        return EvictExpiredHandler(participant_repository)

    @provide(scope=Scope.APP)
    def get_eviction_sweeper(
        self, evict_handler: EvictExpiredHandler, announcer: StatusAnnouncer
    ) -> EvictionSweeper:
        return EvictionSweeper(
            evict_handler,
            announcer,
            interval_seconds=self._config.SWEEP_INTERVAL_SECONDS,
            ttl_seconds=self._config.PRESENCE_TTL_SECONDS,
            leave_text=self._config.LEAVE_NOTICE_TEXT,
        )

    # ==================== PARTICIPANT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_join_participant_handler(
        self,
        participant_repository: ParticipantRepository,
        announcer: StatusAnnouncer,
    ) -> JoinParticipantHandler:
        return JoinParticipantHandler(
            participant_repository, announcer, join_text=self._config.JOIN_NOTICE_TEXT
        )

    @provide(scope=Scope.REQUEST)
    def get_heartbeat_handler(
        self, participant_repository: ParticipantRepository
    ) -> HeartbeatHandler:
        return HeartbeatHandler(participant_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_participants_handler(
        self, participant_repository: ParticipantRepository
    ) -> ListParticipantsHandler:
        return ListParticipantsHandler(participant_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self,
        message_repository: MessageRepository,
        participant_repository: ParticipantRepository,
    ) -> CreateMessageHandler:
        return CreateMessageHandler(message_repository, participant_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_message_handler(
        self,
        message_repository: MessageRepository,
        participant_repository: ParticipantRepository,
    ) -> UpdateMessageHandler:
        return UpdateMessageHandler(message_repository, participant_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_visible_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListVisibleMessagesHandler:
        return ListVisibleMessagesHandler(message_repository)


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create the DI container.

    With no arguments, uses the real Redis client and the environment config.
    """
    if not providers:
        providers = (AppProvider(), RedisProvider())
    return make_async_container(*providers)
