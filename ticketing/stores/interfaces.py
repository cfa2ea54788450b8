"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from ticketing.domain import (
    Enrollment,
    EnrollmentId,
    Payment,
    Ticket,
    TicketId,
    TicketType,
    UserId,
)


class TicketingStore(ABC):
    """Read-only lookups behind the eligibility check."""

    @abstractmethod
    def find_enrollment_by_user(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment, or None if not enrolled."""
        ...

    @abstractmethod
    def find_ticket_by_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the enrollment's first ticket, or None if it has none."""
        ...

    @abstractmethod
    def find_ticket_type_by_ticket(self, ticket_id: TicketId) -> TicketType:
        """Return the type of a ticket. Every ticket has exactly one."""
        ...

    @abstractmethod
    def find_payment_by_ticket(self, ticket_id: TicketId) -> Payment | None:
        """Return the ticket's payment, or None if unpaid."""
        ...
