"""Unit tests for EligibilityService and HotelService.

These test the order of checks and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import pytest

from common.errors import ErrorKind
from hotels.domain.errors import HotelNotFoundError, InvalidHotelIdError, NoHotelsAvailableError
from hotels.services import HotelCatalog, HotelService
from ticketing.domain import TicketStatus
from ticketing.domain.errors import (
    EnrollmentNotFoundError,
    PaymentNotCompletedError,
    TicketIneligibleError,
    TicketNotFoundError,
)
from ticketing.services import EligibilityService
from tests.fakes import InMemoryHotelStore, InMemoryTicketingStore

USER_ID = 7


@pytest.fixture
def ticketing_store() -> InMemoryTicketingStore:
    return InMemoryTicketingStore()


@pytest.fixture
def hotel_store() -> InMemoryHotelStore:
    return InMemoryHotelStore()


@pytest.fixture
def service(ticketing_store, hotel_store) -> HotelService:
    return HotelService(
        eligibility=EligibilityService(ticketing_store),
        catalog=HotelCatalog(hotel_store),
    )


@pytest.fixture
def eligible(ticketing_store):
    ticket = ticketing_store.add_ticket(ticketing_store.enroll(USER_ID))
    ticketing_store.pay(ticket)
    return ticket


class TestEligibilityService:
    """Tests for EligibilityService."""

    def test_no_enrollment_raises_not_found(self, ticketing_store):
        """Given no enrollment, raises EnrollmentNotFoundError after one lookup."""
        with pytest.raises(EnrollmentNotFoundError) as exc_info:
            EligibilityService(ticketing_store).resolve(USER_ID)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert ticketing_store.calls == ["enrollment"]

    def test_enrollment_without_ticket_raises_not_found(self, ticketing_store):
        """Given an enrollment without ticket, raises TicketNotFoundError."""
        ticketing_store.enroll(USER_ID)
        with pytest.raises(TicketNotFoundError) as exc_info:
            EligibilityService(ticketing_store).resolve(USER_ID)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert ticketing_store.calls == ["enrollment", "ticket"]

    def test_other_users_enrollment_is_ignored(self, ticketing_store):
        """Given only another user's paid ticket, raises EnrollmentNotFoundError."""
        ticketing_store.pay(ticketing_store.add_ticket(ticketing_store.enroll(USER_ID + 1)))
        with pytest.raises(EnrollmentNotFoundError):
            EligibilityService(ticketing_store).resolve(USER_ID)

    @pytest.mark.parametrize("paid", [True, False])
    def test_remote_ticket_is_rejected_regardless_of_payment(self, ticketing_store, paid):
        """Given a remote ticket, raises TicketIneligibleError without looking up payment."""
        ticket = ticketing_store.add_ticket(ticketing_store.enroll(USER_ID), is_remote=True)
        if paid:
            ticketing_store.pay(ticket)
        with pytest.raises(TicketIneligibleError) as exc_info:
            EligibilityService(ticketing_store).resolve(USER_ID)
        assert exc_info.value.kind is ErrorKind.PAYMENT_REQUIRED
        assert "payment" not in ticketing_store.calls

    def test_ticket_without_hotel_is_rejected(self, ticketing_store):
        """Given a paid ticket without hotel, raises TicketIneligibleError."""
        ticket = ticketing_store.add_ticket(ticketing_store.enroll(USER_ID), includes_hotel=False)
        ticketing_store.pay(ticket)
        with pytest.raises(TicketIneligibleError):
            EligibilityService(ticketing_store).resolve(USER_ID)

    def test_missing_payment_raises_payment_required(self, ticketing_store):
        """Given an eligible ticket without payment, raises PaymentNotCompletedError."""
        ticketing_store.add_ticket(ticketing_store.enroll(USER_ID))
        with pytest.raises(PaymentNotCompletedError) as exc_info:
            EligibilityService(ticketing_store).resolve(USER_ID)
        assert exc_info.value.kind is ErrorKind.PAYMENT_REQUIRED

    def test_reserved_ticket_with_payment_row_is_not_paid(self, ticketing_store):
        """Given a reserved ticket with a payment row, raises PaymentNotCompletedError."""
        ticket = ticketing_store.add_ticket(ticketing_store.enroll(USER_ID), status=TicketStatus.RESERVED)
        ticketing_store.pay(ticket)
        with pytest.raises(PaymentNotCompletedError):
            EligibilityService(ticketing_store).resolve(USER_ID)

    def test_eligible_user_gets_ticket_context(self, ticketing_store, eligible):
        """Given a paid in-person ticket with hotel, returns the ticket context."""
        context = EligibilityService(ticketing_store).resolve(USER_ID)
        assert context.ticket == eligible
        assert context.ticket_type.grants_hotel
        assert context.payment.ticket_id == eligible.id
        assert ticketing_store.calls == ["enrollment", "ticket", "ticket_type", "payment"]

    def test_eligibility_is_recomputed_on_every_call(self, ticketing_store):
        """Given a payment added between calls, the second call succeeds."""
        ticket = ticketing_store.add_ticket(ticketing_store.enroll(USER_ID))
        service = EligibilityService(ticketing_store)
        with pytest.raises(PaymentNotCompletedError):
            service.resolve(USER_ID)
        ticketing_store.pay(ticket)
        assert service.resolve(USER_ID).ticket == ticket


class TestHotelService:
    """Tests for HotelService."""

    def test_get_all_hotels_requires_eligibility(self, service, hotel_store):
        """Given hotels but no enrollment, raises EnrollmentNotFoundError."""
        hotel_store.add_hotel("Grand")
        with pytest.raises(EnrollmentNotFoundError):
            service.get_all_hotels(USER_ID)

    def test_get_all_hotels_empty_catalog_raises_not_found(self, service, eligible):
        """Given an eligible user and no hotels, raises NoHotelsAvailableError."""
        with pytest.raises(NoHotelsAvailableError) as exc_info:
            service.get_all_hotels(USER_ID)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_get_all_hotels_returns_store_order(self, service, hotel_store, eligible):
        """Given three hotels, returns them in store order."""
        hotels = [hotel_store.add_hotel(name) for name in ("H1", "H2", "H3")]
        assert service.get_all_hotels(USER_ID) == hotels

    def test_get_all_hotels_is_idempotent(self, service, hotel_store, eligible):
        """Given no state change, two calls return identical results."""
        hotel_store.add_hotel("H1")
        assert service.get_all_hotels(USER_ID) == service.get_all_hotels(USER_ID)

    def test_get_all_rooms_invalid_id_raises_error(self, service, eligible):
        """Given an eligible user and a malformed id, raises InvalidHotelIdError."""
        with pytest.raises(InvalidHotelIdError) as exc_info:
            service.get_all_rooms(USER_ID, "abc")
        assert exc_info.value.kind is ErrorKind.INVALID

    def test_get_all_rooms_checks_eligibility_before_id_format(self, service, ticketing_store):
        """Given no enrollment and a malformed id, raises EnrollmentNotFoundError."""
        with pytest.raises(EnrollmentNotFoundError):
            service.get_all_rooms(USER_ID, "abc")
        assert ticketing_store.calls == ["enrollment"]

    def test_get_all_rooms_ineligible_ticket_wins_over_id_format(self, service, ticketing_store):
        """Given a remote ticket and a malformed id, raises TicketIneligibleError."""
        ticketing_store.add_ticket(ticketing_store.enroll(USER_ID), is_remote=True)
        with pytest.raises(TicketIneligibleError):
            service.get_all_rooms(USER_ID, "abc")

    def test_get_all_rooms_requires_eligibility(self, service, ticketing_store, hotel_store):
        """Given an existing hotel and a remote ticket, raises TicketIneligibleError."""
        hotel = hotel_store.add_hotel("Grand")
        ticketing_store.add_ticket(ticketing_store.enroll(USER_ID), is_remote=True)
        with pytest.raises(TicketIneligibleError):
            service.get_all_rooms(USER_ID, str(hotel.id.value))

    def test_get_all_rooms_not_found_raises_error(self, service, eligible):
        """Given an unknown hotel id, raises HotelNotFoundError."""
        with pytest.raises(HotelNotFoundError) as exc_info:
            service.get_all_rooms(USER_ID, "99")
        assert exc_info.value.hotel_id == 99

    def test_get_all_rooms_returns_only_that_hotels_rooms(self, service, hotel_store, eligible):
        """Given rooms in two hotels, returns the requested hotel with only its rooms."""
        grand, plaza = hotel_store.add_hotel("Grand"), hotel_store.add_hotel("Plaza")
        mine = [hotel_store.add_room(grand, "101"), hotel_store.add_room(grand, "102")]
        hotel_store.add_room(plaza, "201")

        hotel = service.get_all_rooms(USER_ID, str(grand.id.value))

        assert hotel.id == grand.id
        assert list(hotel.rooms) == mine
