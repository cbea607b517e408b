"""
Serializers for the content app.

``ResourceSerializer`` exposes camelCase names (``resourceUrl``,
``createdAt``) and assigns the slug through ``SlugAssignmentMixin``.
``downloads`` is read-only; it only changes through the download
endpoint.
"""
from rest_framework import serializers

from common.serializers import SlugAssignmentMixin, TagListField, TimestampFieldsMixin
from .models import Resource


class ResourceSerializer(SlugAssignmentMixin, TimestampFieldsMixin, serializers.ModelSerializer):
    slug = serializers.SlugField(max_length=200, required=False)
    resourceUrl = serializers.URLField(source="resource_url", max_length=500)
    tags = TagListField()

    class Meta:
        model = Resource
        fields = [
            "id", "title", "slug", "description", "type", "category", "level",
            "duration", "author", "downloads", "rating", "students", "image",
            "resourceUrl", "provider", "tags", "featured",
            "createdAt", "updatedAt",
        ]
        read_only_fields = ["id", "downloads"]
        extra_kwargs = {
            "description": {"max_length": 2000},
            "students": {"required": True},
        }
