"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every operation checks eligibility first and only then reads hotel data.
"""

import structlog

from hotels.domain import Hotel, HotelId
from hotels.domain.errors import InvalidHotelIdError, NoHotelsAvailableError
from hotels.services.hotel_catalog import HotelCatalog
from ticketing.services import EligibilityService

logger = structlog.get_logger(__name__)


class HotelService:
    """Service for hotel listing operations."""

    def __init__(self, eligibility: EligibilityService, catalog: HotelCatalog) -> None:
        self._eligibility = eligibility
        self._catalog = catalog

    def get_all_hotels(self, user_id: int) -> list[Hotel]:
        """Return every hotel the eligible user may see.

        Raises:
            EnrollmentNotFoundError, TicketNotFoundError: Missing records.
            TicketIneligibleError, PaymentNotCompletedError: Not entitled.
            NoHotelsAvailableError: If there are no hotels at all.
        """
        self._eligibility.resolve(user_id)
        hotels = self._catalog.list_hotels()
        if not hotels:
            raise NoHotelsAvailableError()
        logger.debug("hotels_listed", user_id=user_id, count=len(hotels))
        return hotels

    def get_all_rooms(self, user_id: int, hotel_id: str) -> Hotel:
        """Return a hotel together with its rooms.

        Raises:
            EnrollmentNotFoundError, TicketNotFoundError: Missing records.
            TicketIneligibleError, PaymentNotCompletedError: Not entitled.
            InvalidHotelIdError: If hotel_id is not a positive integer.
            HotelNotFoundError: If the hotel does not exist.
        """
        self._eligibility.resolve(user_id)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError as e:
            raise InvalidHotelIdError() from e

        hotel = self._catalog.get_hotel_with_rooms(parsed_id)
        logger.debug("hotel_rooms_listed", user_id=user_id, hotel_id=parsed_id.value, count=len(hotel.rooms))
        return hotel
