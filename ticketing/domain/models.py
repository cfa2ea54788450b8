"""Domain models representing persisted ticketing state.

These are pure domain objects. Django ORM models are in ticketing/models.py.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ticketing.domain.value_objects import (
    EnrollmentId,
    Money,
    PaymentId,
    TicketId,
    TicketTypeId,
    UserId,
)


class TicketStatus(Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Enrollment:
    """A user's registration for the event."""

    id: EnrollmentId
    user_id: UserId
    name: str
    created_at: datetime


@dataclass(frozen=True)
class TicketType:
    """Ticket category: remote or in person, with or without hotel."""

    id: TicketTypeId
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool

    @property
    def grants_hotel(self) -> bool:
        return self.includes_hotel and not self.is_remote


@dataclass(frozen=True)
class Ticket:
    id: TicketId
    enrollment_id: EnrollmentId
    ticket_type_id: TicketTypeId
    status: TicketStatus
    created_at: datetime

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID


@dataclass(frozen=True)
class Payment:
    id: PaymentId
    ticket_id: TicketId
    value: Money
    card_issuer: str
    card_last_digits: str
    created_at: datetime


@dataclass(frozen=True)
class TicketContext:
    """Everything the eligibility check looked at, once it has passed."""

    enrollment: Enrollment
    ticket: Ticket
    ticket_type: TicketType
    payment: Payment
