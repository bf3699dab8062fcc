"""
Participants API Router.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Redis
"""

from fastapi import APIRouter, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from chatroom.application.commands.participants import (
    JoinParticipantCommand,
    JoinParticipantHandler,
)
from chatroom.application.dto.participant import ParticipantDTO
from chatroom.application.queries.participants import (
    ListParticipantsQuery,
    ListParticipantsHandler,
)
from chatroom.config.settings import Config
from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.infrastructure.sanitizer import sanitize_text


class JoinParticipantRequest(BaseModel):
    """Request body for joining the room."""

    name: str = Field(min_length=1, max_length=Config.MAX_NAME_LENGTH)


router = APIRouter(prefix="/participants", tags=["participants"])


@router.post(
    "",
    response_model=ParticipantDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def join_participant(
    request: JoinParticipantRequest,
    handler: FromDishka[JoinParticipantHandler],
):
    """Register a presence under a unique name."""
    command = JoinParticipantCommand(name=ParticipantName(sanitize_text(request.name)))
    participant = await handler.execute(command)
    return ParticipantDTO.from_entity(participant)


@router.get(
    "",
    response_model=list[ParticipantDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_participants(handler: FromDishka[ListParticipantsHandler]):
    participants = await handler.execute(ListParticipantsQuery())
    return [ParticipantDTO.from_entity(p) for p in participants]
