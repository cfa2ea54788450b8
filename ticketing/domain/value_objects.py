"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class UserId:
    """Identifier of the authenticated user."""

    value: int


@dataclass(frozen=True)
class EnrollmentId:
    """Unique identifier for an Enrollment."""

    value: int


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: int


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: int


@dataclass(frozen=True)
class PaymentId:
    """Unique identifier for a Payment."""

    value: int


@dataclass(frozen=True)
class Money:
    """Amount in cents."""

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_cents(cls, cents: int) -> Self:
        return cls(cents=int(cents))

    def __str__(self) -> str:
        return f"{self.cents // 100}.{self.cents % 100:02d}"
