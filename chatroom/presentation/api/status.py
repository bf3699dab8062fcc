"""Status (heartbeat) API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from chatroom.application.commands.participants import HeartbeatCommand, HeartbeatHandler
from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.presentation.dependencies.user import get_requester


class HeartbeatResponse(BaseModel):
    success: bool


router = APIRouter(prefix="/status", tags=["status"])


@router.post(
    "",
    response_model=HeartbeatResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def heartbeat(
    handler: FromDishka[HeartbeatHandler],
    requester: ParticipantName = Depends(get_requester),
):
    """Keep the requester's presence alive."""
    await handler.execute(HeartbeatCommand(name=requester))
    return HeartbeatResponse(success=True)
