"""Message queries."""

from chatroom.application.queries.messages.list_visible_messages import (
    ListVisibleMessagesQuery,
    ListVisibleMessagesHandler,
)

__all__ = [
    "ListVisibleMessagesQuery",
    "ListVisibleMessagesHandler",
]
