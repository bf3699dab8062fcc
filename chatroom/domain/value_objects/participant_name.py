"""
ParticipantName Value Object - The self-asserted unique name of a participant.
"""

from dataclasses import dataclass

from chatroom.domain.exceptions import DomainValidationError


@dataclass(frozen=True)
class ParticipantName:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise DomainValidationError("Participant name must be a string")
        trimmed = self.value.strip()
        if not trimmed:
            raise DomainValidationError("Participant name cannot be empty")
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
