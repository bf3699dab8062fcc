"""
Requester Dependency for FastAPI.

Identity is self-asserted: the ``user`` header carries the participant name.
It is sanitized exactly like a name given at join time, so a header value
and a registered name compare equal.
"""

from fastapi import Header

from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.infrastructure.sanitizer import sanitize_text


async def get_requester(user: str = Header(..., alias="user")) -> ParticipantName:
    """
    Raises:
        RequestValidationError (422) if the header is missing
        DomainValidationError (422) if nothing is left after sanitizing
    """
    return ParticipantName(sanitize_text(user))
