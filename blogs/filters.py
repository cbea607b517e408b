"""
Query-string filters for blog listings.

``BlogFilter`` serves the public listing, ``BlogAdminFilter`` the admin
listing that also sees drafts.  ``category=all`` means no category
filter.
"""
from django.db.models import F
from django_filters import rest_framework as filters

from common.search import category_filter, json_list_contains, text_search
from .models import Blog


class BlogFilter(filters.FilterSet):
    SORT_POPULAR = "popular"
    SORT_TRENDING = "trending"

    category = filters.CharFilter(method=category_filter)
    tag = filters.CharFilter(method="filter_tag")
    featured = filters.BooleanFilter()
    search = filters.CharFilter(method="filter_search")
    filter = filters.ChoiceFilter(
        choices=[(SORT_POPULAR, "Popular"), (SORT_TRENDING, "Trending")],
        method="filter_sort",
    )

    class Meta:
        model = Blog
        fields = ["featured"]

    def filter_tag(self, queryset, name, value):
        return json_list_contains(queryset, "tags", value)

    def filter_search(self, queryset, name, value):
        return text_search(queryset, ("title", "excerpt", "content"), value)

    def filter_sort(self, queryset, name, value):
        if value == self.SORT_POPULAR:
            return queryset.order_by("-likes", "-published_date", "-id")
        if value == self.SORT_TRENDING:
            return queryset.annotate(engagement=F("likes") + F("views")).order_by(
                "-engagement", "-published_date", "-id"
            )
        return queryset


class BlogAdminFilter(filters.FilterSet):
    category = filters.CharFilter(method=category_filter)
    published = filters.BooleanFilter()

    class Meta:
        model = Blog
        fields = ["published"]
