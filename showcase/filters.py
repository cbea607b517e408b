"""Query-string filters for showcase listings."""
from django_filters import rest_framework as filters

from common.search import category_filter, json_list_contains, text_search
from .models import Showcase


class ShowcaseFilter(filters.FilterSet):
    FILTER_FEATURED = "featured"
    FILTER_TRENDING = "trending"
    FILTER_NEW = "new"
    FILTER_POPULAR = "popular"

    category = filters.CharFilter(method=category_filter)
    tag = filters.CharFilter(method="filter_tag")
    search = filters.CharFilter(method="filter_search")
    filter = filters.ChoiceFilter(
        choices=[
            (FILTER_FEATURED, "Featured"),
            (FILTER_TRENDING, "Trending"),
            (FILTER_NEW, "New"),
            (FILTER_POPULAR, "Popular"),
        ],
        method="filter_quick",
    )

    class Meta:
        model = Showcase
        fields = []

    def filter_tag(self, queryset, name, value):
        return json_list_contains(queryset, "tags", value)

    def filter_search(self, queryset, name, value):
        return text_search(queryset, ("title", "description"), value)

    def filter_quick(self, queryset, name, value):
        if value == self.FILTER_FEATURED:
            return queryset.filter(featured=True)
        if value == self.FILTER_TRENDING:
            return queryset.filter(trending=True).order_by("-stars", "-created_at", "-id")
        if value == self.FILTER_NEW:
            return queryset.filter(recently_added=True)
        if value == self.FILTER_POPULAR:
            return queryset.order_by("-stars", "-id")
        return queryset


class ShowcaseAdminFilter(filters.FilterSet):
    category = filters.CharFilter(method=category_filter)
    published = filters.BooleanFilter()

    class Meta:
        model = Showcase
        fields = ["published"]
