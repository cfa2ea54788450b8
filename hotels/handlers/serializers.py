"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    hotel_id = serializers.IntegerField(source="hotel_id.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class HotelWithRoomsSerializer(HotelSerializer):
    rooms = RoomSerializer(many=True)
