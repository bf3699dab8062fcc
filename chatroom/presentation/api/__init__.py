"""
API Routers - FastAPI endpoint definitions.
"""

from chatroom.presentation.api.participants import router as participants_router
from chatroom.presentation.api.messages import router as messages_router
from chatroom.presentation.api.status import router as status_router
from chatroom.presentation.api.metrics import router as metrics_router

__all__ = [
    "participants_router",
    "messages_router",
    "status_router",
    "metrics_router",
]
