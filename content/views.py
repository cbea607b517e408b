"""
ViewSets for the content app.

Resources are public to read, by id or by slug.  ``POST <id>/download``
is public too and bumps the download counter atomically; it has its own
rate limit.  All other writes need an admin token.
"""
from rest_framework.decorators import action

from common.counters import increment
from common.responses import success_response
from common.throttling import DownloadRateThrottle
from common.viewsets import ContentViewSet
from .filters import ResourceFilter
from .models import Resource
from .serializers import ResourceSerializer


class ResourceViewSet(ContentViewSet):
    serializer_class = ResourceSerializer
    filterset_class = ResourceFilter
    public_actions = ("list", "retrieve", "by_slug", "download")
    action_throttles = {"download": [DownloadRateThrottle]}
    items_key = "resources"
    list_message = "Found {count} resources"
    entity_label = "Resource"

    def get_queryset(self):
        return Resource.objects.order_by("-featured", "-created_at", "-id")

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-zA-Z0-9_]+)")
    def by_slug(self, request, slug=None):
        resource = self.get_by_slug(self.get_queryset(), slug)
        return success_response(self.get_serializer(resource).data)

    @action(detail=True, methods=["post"])
    def download(self, request, pk=None):
        downloads = increment(Resource.objects.all(), pk, "downloads", "Resource not found.")
        return success_response({"downloads": downloads}, message="Download tracked")
