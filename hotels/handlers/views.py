"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.errors import DomainError
from common.http import error_response
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import build_hotel_service


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = build_hotel_service().get_all_hotels(request.user.id)
        except DomainError as e:
            return error_response(e)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelRoomsView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = build_hotel_service().get_all_rooms(request.user.id, hotel_id)
        except DomainError as e:
            return error_response(e)
        return Response(HotelWithRoomsSerializer(hotel).data)
