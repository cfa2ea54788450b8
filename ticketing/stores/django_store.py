"""Django ORM implementation of the TicketingStore."""

from ticketing import models
from ticketing.domain import (
    Enrollment,
    EnrollmentId,
    Money,
    Payment,
    PaymentId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from ticketing.stores.interfaces import TicketingStore


class DjangoTicketingStore(TicketingStore):
    """Database-backed ticketing store using Django ORM."""

    def find_enrollment_by_user(self, user_id: UserId) -> Enrollment | None:
        row = models.Enrollment.objects.filter(user_id=user_id.value).first()
        return _to_enrollment(row) if row else None

    def find_ticket_by_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = (
            models.Ticket.objects.filter(enrollment_id=enrollment_id.value)
            .order_by("id")
            .first()
        )
        return _to_ticket(row) if row else None

    def find_ticket_type_by_ticket(self, ticket_id: TicketId) -> TicketType:
        row = models.TicketType.objects.get(tickets__id=ticket_id.value)
        return _to_ticket_type(row)

    def find_payment_by_ticket(self, ticket_id: TicketId) -> Payment | None:
        row = (
            models.Payment.objects.filter(ticket_id=ticket_id.value)
            .order_by("id")
            .first()
        )
        return _to_payment(row) if row else None


def _to_enrollment(row: models.Enrollment) -> Enrollment:
    return Enrollment(
        id=EnrollmentId(row.id),
        user_id=UserId(row.user_id),
        name=row.name,
        created_at=row.created_at,
    )


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        enrollment_id=EnrollmentId(row.enrollment_id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        status=TicketStatus(row.status),
        created_at=row.created_at,
    )


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        name=row.name,
        price=Money.from_cents(row.price),
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
    )


def _to_payment(row: models.Payment) -> Payment:
    return Payment(
        id=PaymentId(row.id),
        ticket_id=TicketId(row.ticket_id),
        value=Money.from_cents(row.value),
        card_issuer=row.card_issuer,
        card_last_digits=row.card_last_digits,
        created_at=row.created_at,
    )
