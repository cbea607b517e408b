"""Serializers for the creators app."""
from rest_framework import serializers

from common.serializers import TimestampFieldsMixin, social_media_field
from .models import Creator


class CreatorCoinSerializer(serializers.Serializer):
    """``creatorCoin`` rendered from the ``coin_*`` columns."""
    symbol = serializers.CharField(source="coin_symbol", max_length=10)
    marketCap = serializers.FloatField(source="coin_market_cap", min_value=0)
    price = serializers.FloatField(source="coin_price", min_value=0)
    change24h = serializers.FloatField(source="coin_change_24h")

    def validate_symbol(self, value):
        return value.upper()


class CreatorSerializer(TimestampFieldsMixin, serializers.ModelSerializer):
    profileImage = serializers.URLField(source="profile_image", max_length=500)
    socialMedia = social_media_field(source="social_media")
    creatorCoin = CreatorCoinSerializer(source="*")

    class Meta:
        model = Creator
        fields = [
            "id", "name", "bio", "profileImage", "socialMedia",
            "creatorCoin", "followers", "createdAt", "updatedAt",
        ]
        read_only_fields = ["id"]
        extra_kwargs = {"bio": {"max_length": 1000}}
