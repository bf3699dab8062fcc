"""
DOMAIN EXCEPTIONS - Business rule violations

Every error the core raises is one of the five ChatError variants below.
The presentation layer maps ErrorKind to an HTTP status in one place
(chatroom/presentation/errors.py).
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind
from chatroom.domain.exceptions.validation_error import DomainValidationError
from chatroom.domain.exceptions.conflict import ConflictError
from chatroom.domain.exceptions.entity_not_found import EntityNotFoundError
from chatroom.domain.exceptions.unauthorized import UnauthorizedError
from chatroom.domain.exceptions.internal import InternalError

__all__ = [
    "ChatError",
    "ErrorKind",
    "DomainValidationError",
    "ConflictError",
    "EntityNotFoundError",
    "UnauthorizedError",
    "InternalError",
]
