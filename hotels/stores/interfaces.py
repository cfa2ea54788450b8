"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def find_all_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id, without rooms."""
        ...

    @abstractmethod
    def find_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms ordered by id, or None if not found."""
        ...
