from ticketing.domain.models import (
    Enrollment,
    Payment,
    Ticket,
    TicketContext,
    TicketStatus,
    TicketType,
)
from ticketing.domain.value_objects import (
    EnrollmentId,
    Money,
    PaymentId,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Enrollment",
    "Payment",
    "Ticket",
    "TicketContext",
    "TicketStatus",
    "TicketType",
    "EnrollmentId",
    "PaymentId",
    "TicketId",
    "TicketTypeId",
    "UserId",
    "Money",
]
