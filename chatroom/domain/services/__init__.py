"""
DOMAIN SERVICES - Pure functions over entities (no I/O).
"""

from chatroom.domain.services.authorization import is_owner, ensure_owner

__all__ = [
    "is_owner",
    "ensure_owner",
]
