"""Django ORM implementation of the HotelStore."""

from django.db.models import Prefetch

from hotels import models
from hotels.domain import Capacity, Hotel, HotelId, Room, RoomId
from hotels.stores.interfaces import HotelStore


class DjangoHotelStore(HotelStore):
    """Database-backed hotel store using Django ORM."""

    def find_all_hotels(self) -> list[Hotel]:
        return [_to_hotel(row) for row in models.Hotel.objects.order_by("id")]

    def find_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        row = (
            models.Hotel.objects.filter(id=hotel_id.value)
            .prefetch_related(Prefetch("rooms", queryset=models.Room.objects.order_by("id")))
            .first()
        )
        if row is None:
            return None
        return _to_hotel(row, rooms=tuple(_to_room(room) for room in row.rooms.all()))


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
