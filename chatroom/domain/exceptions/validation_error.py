"""
DomainValidationError - Raised when input breaks a domain rule.
Maps to: HTTP 422 Unprocessable Entity
"""

from chatroom.domain.exceptions.base import ChatError, ErrorKind


class DomainValidationError(ChatError):
    """Exception raised for domain validation errors."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid input"
