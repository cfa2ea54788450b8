"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from hotels.domain import Capacity, HotelId
from ticketing.domain import Money, TicketStatus
from tests.fakes import InMemoryTicketingStore


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(1999).cents == 1999

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).cents == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(25005)) == "250.05"
        assert str(Money(7)) == "0.07"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(3).value == 3

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestHotelId:
    """Tests for HotelId value object."""

    def test_from_string_valid_id(self):
        """HotelId.from_string parses a positive integer."""
        assert HotelId.from_string("42") == HotelId(42)

    @pytest.mark.parametrize("raw", ["abc", "", "-1", "1.5", " 3"])
    def test_from_string_invalid_id(self, raw):
        """HotelId.from_string raises ValueError for non-numeric input."""
        with pytest.raises(ValueError):
            HotelId.from_string(raw)

    def test_zero_is_rejected(self):
        with pytest.raises(ValueError):
            HotelId.from_string("0")


class TestTicketTypeRules:
    @pytest.mark.parametrize(
        ("is_remote", "includes_hotel", "expected"),
        [(False, True, True), (True, True, False), (False, False, False), (True, False, False)],
    )
    def test_grants_hotel(self, is_remote, includes_hotel, expected):
        store = InMemoryTicketingStore()
        ticket = store.add_ticket(store.enroll(1), is_remote=is_remote, includes_hotel=includes_hotel)
        assert store.ticket_types[ticket.ticket_type_id.value].grants_hotel is expected

    def test_only_paid_status_counts_as_paid(self):
        store = InMemoryTicketingStore()
        enrollment = store.enroll(1)
        assert store.add_ticket(enrollment, status=TicketStatus.PAID).is_paid
        assert not store.add_ticket(enrollment, status=TicketStatus.RESERVED).is_paid
