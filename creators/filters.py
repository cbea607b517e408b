"""Query-string filters for creator listings."""
from django_filters import rest_framework as filters

from common.search import text_search
from .models import Creator


class CreatorFilter(filters.FilterSet):
    search = filters.CharFilter(method="filter_search")

    class Meta:
        model = Creator
        fields = []

    def filter_search(self, queryset, name, value):
        return text_search(queryset, ("name", "bio"), value)
