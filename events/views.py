"""
ViewSets for the events app.

Listing and retrieval are public; create, update and delete require an
admin token.  Lists filter on ``status`` and ``type`` and sort by date
ascending, then by creation time descending.
"""
from common.viewsets import ContentViewSet
from .filters import EventFilter
from .models import Event
from .serializers import EventSerializer


class EventViewSet(ContentViewSet):
    serializer_class = EventSerializer
    filterset_class = EventFilter
    items_key = "events"
    list_message = "Found {count} events"
    entity_label = "Event"

    def get_queryset(self):
        return Event.objects.order_by("date", "-created_at")
