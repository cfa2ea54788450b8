"""Domain error codes for authentication."""

from enum import Enum

from common.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Authentication error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"


class UnauthorizedError(DomainError):
    """Raised when a bearer token cannot be resolved to a live session."""

    def __init__(self, reason: str = "invalid token") -> None:
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            kind=ErrorKind.UNAUTHORIZED,
            message="You must be signed in to continue",
        )
        self.reason = reason
