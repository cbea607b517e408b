"""Query-string filters for builder project listings."""
from django_filters import rest_framework as filters

from common.search import json_list_contains_any, text_search
from .models import BuilderProject


class BuilderProjectFilter(filters.FilterSet):
    status = filters.ChoiceFilter(choices=BuilderProject.STATUS_CHOICES)
    # comma separated, matches projects using any of the listed technologies
    tech = filters.CharFilter(method="filter_tech")
    search = filters.CharFilter(method="filter_search")

    class Meta:
        model = BuilderProject
        fields = ["status"]

    def filter_tech(self, queryset, name, value):
        return json_list_contains_any(queryset, "tech", [t.strip() for t in value.split(",")])

    def filter_search(self, queryset, name, value):
        return text_search(queryset, ("title", "description"), value)
