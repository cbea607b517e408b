"""
ViewSets for the creators app.

Public listing supports a ``search`` term over name and bio; writes need
an admin token.
"""
from common.viewsets import ContentViewSet
from .filters import CreatorFilter
from .models import Creator
from .serializers import CreatorSerializer


class CreatorViewSet(ContentViewSet):
    serializer_class = CreatorSerializer
    filterset_class = CreatorFilter
    items_key = "creators"
    list_message = "Found {count} creators"
    entity_label = "Creator"

    def get_queryset(self):
        return Creator.objects.order_by("-created_at", "-id")
