"""Query-string filters for event listings."""
from django_filters import rest_framework as filters

from .models import Event


class EventFilter(filters.FilterSet):
    status = filters.ChoiceFilter(choices=Event.STATUS_CHOICES)
    type = filters.ChoiceFilter(choices=Event.TYPE_CHOICES)

    class Meta:
        model = Event
        fields = ["status", "type"]
