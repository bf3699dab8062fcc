from typing import AsyncIterable

import pytest
from dishka import Provider, Scope, provide
from fakeredis import FakeAsyncRedis, FakeServer
from fastapi.testclient import TestClient
from redis.asyncio import Redis

from chatroom.application.services.status_announcer import StatusAnnouncer
from chatroom.config.settings import TestingConfig
from chatroom.fastapi_app import create_fastapi_app
from chatroom.infrastructure.persistence import (
    RedisMessageRepository,
    RedisParticipantRepository,
)
from chatroom.setup.ioc.container import AppProvider, create_container


class FakeRedisProvider(Provider):
    """Serves a fakeredis client bound to one in-memory server."""

    def __init__(self, server: FakeServer):
        super().__init__()
        self._server = server

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = FakeAsyncRedis(server=self._server, decode_responses=True)
        yield client
        await client.aclose()


class ExpiringConfig(TestingConfig):
    """Every participant is already stale at the next sweep."""

    PRESENCE_TTL_SECONDS = 0.0


# ==================== STORE ====================


@pytest.fixture()
async def redis():
    client = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture()
def participant_repository(redis):
    return RedisParticipantRepository(redis, key_prefix="test")


@pytest.fixture()
def message_repository(redis):
    return RedisMessageRepository(redis, key_prefix="test")


@pytest.fixture()
def announcer(message_repository):
    return StatusAnnouncer(message_repository, attempts=3, wait_seconds=0.0)


# ==================== HTTP ====================


@pytest.fixture()
def fake_server():
    return FakeServer()


@pytest.fixture()
def app_factory(fake_server):
    """Builds apps that share one in-memory store; the sweeper is driven by hand."""

    def _build(config=TestingConfig, *extra_providers: Provider):
        container = create_container(
            AppProvider(config), FakeRedisProvider(fake_server), *extra_providers
        )
        return create_fastapi_app(container, sweeper_enabled=False)

    return _build


@pytest.fixture()
def app(app_factory):
    """Create and configure a new FastAPI app instance for each test."""
    return app_factory()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; the lifespan runs for the whole test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def expiring_client(app_factory):
    with TestClient(app_factory(ExpiringConfig)) as test_client:
        yield test_client
