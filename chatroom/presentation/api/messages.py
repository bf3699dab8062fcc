"""
Messages API Router - post, read, edit and delete chat messages.

Every endpoint identifies the requester by the ``user`` header. Text fields
are sanitized before they reach the application layer; clients may only
post broadcast or private messages, status notices are system generated.
"""

from logging import getLogger
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from chatroom.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from chatroom.application.dto.message import MessageDTO
from chatroom.application.queries.messages import (
    ListVisibleMessagesQuery,
    ListVisibleMessagesHandler,
)
from chatroom.config.settings import Config
from chatroom.domain.exceptions import DomainValidationError
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.infrastructure.sanitizer import sanitize_text
from chatroom.presentation.dependencies.user import get_requester


# ==================== REQUEST/RESPONSE MODELS ====================


class MessageRequest(BaseModel):
    """Request body for posting or editing a message."""

    to: str = Field(min_length=1, max_length=Config.MAX_NAME_LENGTH)
    text: str = Field(min_length=1, max_length=Config.MAX_TEXT_LENGTH)
    kind: Literal["broadcast-message", "private-message"]

    def cleaned(self) -> tuple[str, str]:
        """Sanitized (to, text). Raises DomainValidationError if either ends up empty."""
        to = sanitize_text(self.to)
        text = sanitize_text(self.text)
        if not to:
            raise DomainValidationError("Field 'to' is empty after sanitizing")
        if not text:
            raise DomainValidationError("Field 'text' is empty after sanitizing")
        return to, text


class DeleteMessageResponse(BaseModel):
    success: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    request: MessageRequest,
    handler: FromDishka[CreateMessageHandler],
    requester: ParticipantName = Depends(get_requester),
):
    """Post a message as the requester."""
    to, text = request.cleaned()
    message = await handler.execute(
        CreateMessageCommand(sender=requester, to=to, text=text, kind=request.kind)
    )
    return MessageDTO.from_entity(message)


@router.get(
    "",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    handler: FromDishka[ListVisibleMessagesHandler],
    requester: ParticipantName = Depends(get_requester),
    limit: Optional[int] = Query(None),
):
    """
    Messages visible to the requester, oldest first.

    ``limit`` keeps only the most recent N; zero, negative or absent
    returns the whole visible log.
    """
    messages = await handler.execute(
        ListVisibleMessagesQuery(user=requester, limit=limit)
    )
    return [MessageDTO.from_entity(m) for m in messages]


@router.put(
    "/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def update_message(
    message_id: str,
    request: MessageRequest,
    handler: FromDishka[UpdateMessageHandler],
    requester: ParticipantName = Depends(get_requester),
):
    """Replace to/text/kind of a message the requester wrote."""
    to, text = request.cleaned()
    message = await handler.execute(
        UpdateMessageCommand(
            message_id=MessageId(message_id),
            requester=requester,
            to=to,
            text=text,
            kind=request.kind,
        )
    )
    return MessageDTO.from_entity(message)


@router.delete(
    "/{message_id}",
    response_model=DeleteMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_message(
    message_id: str,
    handler: FromDishka[DeleteMessageHandler],
    requester: ParticipantName = Depends(get_requester),
):
    """Delete a message the requester wrote."""
    await handler.execute(
        DeleteMessageCommand(message_id=MessageId(message_id), requester=requester)
    )
    return DeleteMessageResponse(success=True)
