"""Serializers for the newsletter app."""
from rest_framework import serializers

from common.validators import NormalizedEmailField
from .models import Subscriber


class SubscribeSerializer(serializers.Serializer):
    email = NormalizedEmailField()
    source = serializers.CharField(max_length=50, required=False, allow_blank=True)


class UnsubscribeSerializer(serializers.Serializer):
    email = NormalizedEmailField()


class SubscriberSerializer(serializers.ModelSerializer):
    subscribedAt = serializers.DateTimeField(source="subscribed_at", read_only=True)
    unsubscribedAt = serializers.DateTimeField(source="unsubscribed_at", read_only=True)

    class Meta:
        model = Subscriber
        fields = ["id", "email", "source", "status", "subscribedAt", "unsubscribedAt"]
        read_only_fields = fields
