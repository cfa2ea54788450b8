"""Domain error codes for the ticketing module."""

from enum import Enum

from common.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    TICKET_INELIGIBLE = "TICKET_INELIGIBLE"
    PAYMENT_NOT_COMPLETED = "PAYMENT_NOT_COMPLETED"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has not enrolled."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            kind=ErrorKind.NOT_FOUND,
            message="no enrollment",
        )
        self.user_id = user_id


class TicketNotFoundError(DomainError):
    """Raised when the enrollment has no ticket."""

    def __init__(self, enrollment_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            kind=ErrorKind.NOT_FOUND,
            message="no ticket",
        )
        self.enrollment_id = enrollment_id


class TicketIneligibleError(DomainError):
    """Raised when the ticket type is remote or excludes the hotel."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_INELIGIBLE,
            kind=ErrorKind.PAYMENT_REQUIRED,
            message="ticket ineligible for hotel benefit",
        )
        self.ticket_id = ticket_id


class PaymentNotCompletedError(DomainError):
    """Raised when the ticket has no payment or is not marked paid."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_NOT_COMPLETED,
            kind=ErrorKind.PAYMENT_REQUIRED,
            message="payment not completed",
        )
        self.ticket_id = ticket_id
