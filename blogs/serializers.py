"""
Serializers for the blogs app.

``author`` and ``stats`` are nested views over flat columns.  Stats are
read-only here; they change only through the like, bookmark and view
endpoints.  ``readTime`` is estimated from the content when a post is
created without one.
"""
from rest_framework import serializers

from common.serializers import SlugAssignmentMixin, TagListField, TimestampFieldsMixin
from .models import Blog
from .utils import estimate_read_time


class BlogAuthorSerializer(serializers.Serializer):
    name = serializers.CharField(source="author_name", max_length=100)
    role = serializers.CharField(source="author_role", max_length=100, required=False, allow_blank=True)
    bio = serializers.CharField(source="author_bio", required=False, allow_blank=True)
    avatar = serializers.URLField(source="author_avatar", max_length=500, required=False, allow_blank=True)


class BlogStatsSerializer(serializers.Serializer):
    likes = serializers.IntegerField(read_only=True)
    comments = serializers.IntegerField(read_only=True)
    bookmarks = serializers.IntegerField(read_only=True)
    views = serializers.IntegerField(read_only=True)


class BlogSerializer(SlugAssignmentMixin, TimestampFieldsMixin, serializers.ModelSerializer):
    slug = serializers.SlugField(max_length=200, required=False)
    author = BlogAuthorSerializer(source="*")
    stats = BlogStatsSerializer(source="*", read_only=True)
    publishedDate = serializers.DateTimeField(source="published_date", required=False)
    readTime = serializers.CharField(source="read_time", max_length=50, required=False, allow_blank=True)
    tags = TagListField()

    class Meta:
        model = Blog
        fields = [
            "id", "title", "slug", "excerpt", "content", "author",
            "publishedDate", "readTime", "category", "image", "tags",
            "featured", "published", "stats", "color",
            "createdAt", "updatedAt",
        ]
        read_only_fields = ["id"]

    def create(self, validated_data):
        if not validated_data.get("read_time"):
            validated_data["read_time"] = estimate_read_time(validated_data.get("content", ""))
        return super().create(validated_data)

    def update(self, instance, validated_data):
        if "read_time" in validated_data and not validated_data["read_time"]:
            validated_data["read_time"] = estimate_read_time(validated_data.get("content", instance.content))
        return super().update(instance, validated_data)


class BlogListSerializer(BlogSerializer):
    """List representation; the full ``content`` is left out."""

    class Meta(BlogSerializer.Meta):
        fields = [name for name in BlogSerializer.Meta.fields if name != "content"]


class RelatedBlogSerializer(serializers.ModelSerializer):
    readTime = serializers.CharField(source="read_time", read_only=True)

    class Meta:
        model = Blog
        fields = ["id", "title", "category", "readTime", "slug", "image", "excerpt"]
        read_only_fields = fields
