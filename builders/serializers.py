"""
Serializers for the builders app.

``tech`` must name at least one technology; ``socialMedia`` follows the
shared ``{platform, url}`` link shape.
"""
from rest_framework import serializers

from common.serializers import TagListField, TimestampFieldsMixin, social_media_field
from .models import BuilderProject


class BuilderProjectSerializer(TimestampFieldsMixin, serializers.ModelSerializer):
    tech = TagListField(allow_empty=False, required=True)
    githubUrl = serializers.URLField(source="github_url", max_length=500)
    websiteUrl = serializers.URLField(source="website_url", max_length=500, required=False, allow_blank=True)
    socialMedia = social_media_field(source="social_media")

    class Meta:
        model = BuilderProject
        fields = [
            "id", "title", "creator", "description", "tech", "status",
            "users", "tvl", "image", "githubUrl", "websiteUrl", "socialMedia",
            "createdAt", "updatedAt",
        ]
        read_only_fields = ["id"]
        extra_kwargs = {"description": {"max_length": 2000}}

    def validate_tech(self, value):
        if not value:
            raise serializers.ValidationError("At least one technology is required.")
        return value
