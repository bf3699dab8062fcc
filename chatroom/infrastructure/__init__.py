"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- redis_client.py: Async Redis client factory (the document store handle)
- persistence/: Redis repository implementations
- sanitizer.py: Markup stripping for user supplied text
"""

from chatroom.infrastructure.redis_client import create_redis_client, close_redis_client
from chatroom.infrastructure.sanitizer import sanitize_text

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "sanitize_text",
]
