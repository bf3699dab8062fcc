"""
Base interfaces for CQRS pattern.

Commands change presence or message state; queries only read it. Each
handler receives its dependencies (repository ports, services) at
construction and exposes a single async ``execute``.

Usage:
    @dataclass(frozen=True)
    class HeartbeatCommand(Command[None]):
        name: ParticipantName

    class HeartbeatHandler(CommandHandler[None]):
        def __init__(self, participant_repository: ParticipantRepository):
            self._participant_repository = participant_repository

        async def execute(self, command: HeartbeatCommand) -> None:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

TResult = TypeVar("TResult")


class Command(ABC, Generic[TResult]):
    """A write request; TResult is what its handler returns."""


class CommandHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, command: Command[TResult]) -> TResult:
        """Apply the command. Domain errors propagate to the caller."""
        ...


class Query(ABC, Generic[TResult]):
    """A read request; never mutates the store."""


class QueryHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, query: Query[TResult]) -> TResult:
        ...
