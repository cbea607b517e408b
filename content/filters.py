"""Query-string filters for resource listings."""
from django_filters import rest_framework as filters

from common.search import any_icontains
from .models import Resource


class ResourceFilter(filters.FilterSet):
    type = filters.ChoiceFilter(choices=Resource.TYPE_CHOICES)
    level = filters.ChoiceFilter(choices=Resource.LEVEL_CHOICES)
    featured = filters.BooleanFilter()
    search = filters.CharFilter(method="filter_search")

    class Meta:
        model = Resource
        fields = ["category", "type", "level", "featured"]

    def filter_search(self, queryset, name, value):
        # substring match, tags included
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(any_icontains(("title", "description", "tags"), value))
