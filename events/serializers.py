"""
Serializers for the events app.

Wire names are camelCase (``bannerImage``, ``registrationUrl``,
``createdAt``) and map onto the snake_case model fields via ``source``.
"""
from rest_framework import serializers

from .models import Event


class EventSerializer(serializers.ModelSerializer):
    bannerImage = serializers.URLField(source="banner_image", max_length=500)
    registrationUrl = serializers.URLField(
        source="registration_url", max_length=500, required=False, allow_blank=True
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Event
        fields = [
            "id",
            "title", "date", "location", "attendees", "description",
            "type", "price", "status",
            "bannerImage", "registrationUrl",
            "createdAt", "updatedAt",
        ]
        read_only_fields = ["id", "createdAt", "updatedAt"]
        extra_kwargs = {
            "attendees": {"required": True},
            "description": {"max_length": 2000},
        }
