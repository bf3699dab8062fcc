"""
Async Redis Client Factory.

Creates the Redis client with connection pooling for the DI container.
Every repository receives this one client; the pool acquires a connection
per command and releases it when the command completes or fails.
"""

import logging
import redis.asyncio as redis
from redis.asyncio import Redis
from chatroom.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: str | None = None) -> Redis:
    """
    Create async Redis client with connection pool.

    Returns:
        Redis: Connected async Redis client

    Raises:
        redis.ConnectionError: If Redis is not reachable

    Note:
        - decode_responses=True for automatic string decoding
        - socket timeouts bound every store call; a timeout surfaces as a
          RedisError and is reported to clients as an internal error
    """
    url = url or Config.REDIS_URL
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=Config.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=Config.REDIS_SOCKET_TIMEOUT,
    )

    # Test connection
    await client.ping()
    logger.info(f"[Redis] Connected to {url}")

    return client


async def close_redis_client(client: Redis) -> None:
    """
    Close Redis client connection.

    Should be called on application shutdown, after the sweeper is stopped.
    """
    if client:
        await client.aclose()
        logger.info("[Redis] Connection closed")
