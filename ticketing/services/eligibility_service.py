"""Eligibility service - decides whether a user may see hotel data.

The check walks Enrollment -> Ticket -> TicketType -> Payment and stops at
the first failing stage. Nothing is cached: ticket and payment state can
change between requests.
"""

import structlog

from common.errors import DomainError
from ticketing.domain import TicketContext, UserId
from ticketing.domain.errors import (
    EnrollmentNotFoundError,
    PaymentNotCompletedError,
    TicketIneligibleError,
    TicketNotFoundError,
)
from ticketing.stores.interfaces import TicketingStore

logger = structlog.get_logger(__name__)


class EligibilityService:
    """Resolves hotel-benefit eligibility for a user."""

    def __init__(self, store: TicketingStore) -> None:
        self._store = store

    def resolve(self, user_id: int) -> TicketContext:
        """Return the validated ticket context for ``user_id``.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            TicketIneligibleError: If the ticket type is remote or has no hotel.
            PaymentNotCompletedError: If there is no payment or the ticket is not paid.
        """
        try:
            return self._resolve(UserId(user_id))
        except DomainError as e:
            logger.info("hotel_access_denied", user_id=user_id, code=e.code.value)
            raise

    def _resolve(self, user_id: UserId) -> TicketContext:
        enrollment = self._store.find_enrollment_by_user(user_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(user_id.value)

        ticket = self._store.find_ticket_by_enrollment(enrollment.id)
        if ticket is None:
            raise TicketNotFoundError(enrollment.id.value)

        ticket_type = self._store.find_ticket_type_by_ticket(ticket.id)
        if not ticket_type.grants_hotel:
            raise TicketIneligibleError(ticket.id.value)

        payment = self._store.find_payment_by_ticket(ticket.id)
        if payment is None or not ticket.is_paid:
            raise PaymentNotCompletedError(ticket.id.value)

        logger.debug("hotel_access_granted", user_id=user_id.value, ticket_id=ticket.id.value)
        return TicketContext(
            enrollment=enrollment,
            ticket=ticket,
            ticket_type=ticket_type,
            payment=payment,
        )
