from django.urls import path

from hotels.handlers import HotelListView, HotelRoomsView

urlpatterns = [
    path("hotels", HotelListView.as_view(), name="hotel-list"),
    path("hotels/<str:hotel_id>", HotelRoomsView.as_view(), name="hotel-rooms"),
]
