"""Read-only access to hotel listings."""

from hotels.domain import Hotel, HotelId
from hotels.domain.errors import HotelNotFoundError
from hotels.stores.interfaces import HotelStore


class HotelCatalog:
    """Fetches hotels and rooms once access has been granted."""

    def __init__(self, store: HotelStore) -> None:
        self._store = store

    def list_hotels(self) -> list[Hotel]:
        """Return all hotels. An empty catalog is an empty list."""
        return self._store.find_all_hotels()

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            HotelNotFoundError: If the hotel does not exist.
        """
        hotel = self._store.find_hotel_with_rooms(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id.value)
        return hotel
