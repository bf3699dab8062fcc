"""
Message Repository Port - Interface for the messages collection.
Implementation: chatroom/infrastructure/persistence/redis_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatroom.domain.entities.message import Message
from chatroom.domain.value_objects.message_id import MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def add(self, message: Message) -> None: ...

    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def list_chronological(self) -> list[Message]:
        """All messages, oldest first (creation order)."""
        ...

    @abstractmethod
    async def replace(self, message: Message) -> bool:
        """Overwrite an existing message. False if it no longer exists."""
        ...

    @abstractmethod
    async def delete(self, message_id: MessageId) -> bool: ...
