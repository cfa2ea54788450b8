from hotels.services.hotel_catalog import HotelCatalog
from hotels.services.hotel_service import HotelService
from hotels.stores.django_store import DjangoHotelStore
from ticketing.services import EligibilityService
from ticketing.stores.django_store import DjangoTicketingStore


def build_hotel_service() -> HotelService:
    """Wire the service to the Django stores."""
    return HotelService(
        eligibility=EligibilityService(DjangoTicketingStore()),
        catalog=HotelCatalog(DjangoHotelStore()),
    )


__all__ = ["HotelCatalog", "HotelService", "build_hotel_service"]
