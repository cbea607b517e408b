"""
Serializers for the showcase app.

``stats.tvl`` is always derived from ``stats.tvlUsd``; ``stats.stars``
is read-only and only moves through the star endpoint.
"""
from rest_framework import serializers

from common.serializers import SlugAssignmentMixin, TagListField, TimestampFieldsMixin
from .models import Showcase


class ShowcaseStatsSerializer(serializers.Serializer):
    stars = serializers.IntegerField(read_only=True)
    users = serializers.CharField(max_length=50, required=False)
    tvlUsd = serializers.DecimalField(
        source="tvl_usd", max_digits=20, decimal_places=2, min_value=0,
        coerce_to_string=False, required=False,
    )
    tvl = serializers.CharField(source="tvl_display", read_only=True)


class ShowcaseLinksSerializer(serializers.Serializer):
    website = serializers.URLField(source="website_url", max_length=500, required=False, allow_blank=True)
    github = serializers.URLField(source="github_url", max_length=500, required=False, allow_blank=True)
    twitter = serializers.URLField(source="twitter_url", max_length=500, required=False, allow_blank=True)
    discord = serializers.URLField(source="discord_url", max_length=500, required=False, allow_blank=True)
    documentation = serializers.URLField(
        source="documentation_url", max_length=500, required=False, allow_blank=True
    )


class ShowcaseSerializer(SlugAssignmentMixin, TimestampFieldsMixin, serializers.ModelSerializer):
    slug = serializers.SlugField(max_length=200, required=False)
    tags = TagListField()
    stats = ShowcaseStatsSerializer(source="*", required=False)
    links = ShowcaseLinksSerializer(source="*", required=False)
    recentlyAdded = serializers.BooleanField(source="recently_added", required=False)

    class Meta:
        model = Showcase
        fields = [
            "id", "title", "slug", "description", "category", "creator", "image",
            "tags", "stats", "links", "featured", "trending", "recentlyAdded",
            "color", "published", "createdAt", "updatedAt",
        ]
        read_only_fields = ["id"]
        extra_kwargs = {"description": {"max_length": 1000}}
