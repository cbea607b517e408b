"""
Serializer building blocks shared by the content apps.

Nested JSON shapes such as ``stats`` or ``links`` are rendered from flat
model columns with ``source="*"`` serializers; list-of-object fields such
as ``socialMedia`` are stored in a JSON column and validated item by item.
"""
from rest_framework import serializers

from .slugs import unique_slug


class SocialMediaLinkSerializer(serializers.Serializer):
    platform = serializers.CharField(max_length=50)
    url = serializers.URLField(max_length=500)

    def validate_platform(self, value):
        return value.lower()


def social_media_field(**kwargs):
    kwargs.setdefault("required", False)
    return serializers.ListField(child=SocialMediaLinkSerializer(), **kwargs)


class TagListField(serializers.ListField):
    """A list of short, trimmed, de-duplicated tag strings."""

    def __init__(self, **kwargs):
        kwargs.setdefault("child", serializers.CharField(max_length=50))
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        tags = super().to_internal_value(data)
        seen = []
        for tag in tags:
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class TimestampFieldsMixin(serializers.Serializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class SlugAssignmentMixin:
    """
    Assign a unique ``slug`` on create and whenever an update carries a title.

    On create a client-supplied slug is used as the base instead of the
    title; collisions are resolved with ``-1``, ``-2``, ... suffixes.
    """
    slug_source = "title"

    def create(self, validated_data):
        base = validated_data.get("slug") or validated_data[self.slug_source]
        validated_data["slug"] = unique_slug(self.Meta.model, base)
        return super().create(validated_data)

    def update(self, instance, validated_data):
        if validated_data.get(self.slug_source):
            validated_data["slug"] = unique_slug(
                self.Meta.model, validated_data[self.slug_source], exclude_pk=instance.pk
            )
        elif validated_data.get("slug"):
            validated_data["slug"] = unique_slug(self.Meta.model, validated_data["slug"], exclude_pk=instance.pk)
        else:
            validated_data.pop("slug", None)
        return super().update(instance, validated_data)
