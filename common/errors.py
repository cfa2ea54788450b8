"""Error taxonomy shared by every app.

Each app defines its own ``ErrorCode`` enum and concrete errors; the ``kind``
is what the HTTP layer maps to a status code.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories."""

    NOT_FOUND = "NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID = "INVALID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code, kind and user-safe message."""

    code: Enum
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
