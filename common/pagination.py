"""
Pagination utilities for the project.

``SkipLimitPagination`` implements the page/limit contract used by every
list endpoint: ``skip = (page - 1) * limit``, a separate count over the
same filtered queryset, and a ``hasMore`` flag.  The default page size
comes from the view (``page_size``) so each resource keeps its own
default without duplicating the paginator.
"""
from rest_framework import serializers
from rest_framework.pagination import BasePagination

from .responses import success_response

MAX_LIMIT = 100


class PageParamsSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_LIMIT, required=False)


class SkipLimitPagination(BasePagination):
    """Page number + limit paginator with total/hasMore and count headers."""
    page_size = 20
    page_query_param = "page"
    limit_query_param = "limit"

    def paginate_queryset(self, queryset, request, view=None):
        params = PageParamsSerializer(data={
            key: request.query_params[key]
            for key in (self.page_query_param, self.limit_query_param)
            if request.query_params.get(key) not in (None, "")
        })
        params.is_valid(raise_exception=True)
        self.page = params.validated_data["page"]
        self.limit = params.validated_data.get("limit") or getattr(view, "page_size", None) or self.page_size
        self.items_key = getattr(view, "items_key", "results")
        self.message_template = getattr(view, "list_message", None)

        skip = (self.page - 1) * self.limit
        self.total = queryset.count()
        items = list(queryset[skip:skip + self.limit])
        self.count = len(items)
        self.has_more = skip + self.count < self.total
        return items

    def get_paginated_data(self, data):
        return {
            self.items_key: data,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "hasMore": self.has_more,
        }

    def get_headers(self):
        return {
            "X-Total-Count": str(self.total),
            "X-Page": str(self.page),
            "X-Limit": str(self.limit),
        }

    def get_paginated_response(self, data, **extra):
        payload = self.get_paginated_data(data)
        payload.update(extra)
        message = self.message_template.format(total=self.total, count=self.count) if self.message_template else None
        return success_response(payload, message=message, headers=self.get_headers())

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "message": {"type": "string"},
                "data": {
                    "type": "object",
                    "properties": {
                        "items": schema,
                        "total": {"type": "integer"},
                        "page": {"type": "integer"},
                        "limit": {"type": "integer"},
                        "hasMore": {"type": "boolean"},
                    },
                },
            },
        }


def read_limit(request, default, maximum=MAX_LIMIT):
    """Validated ``limit`` query parameter for endpoints that return a plain list."""
    raw = request.query_params.get("limit")
    if raw in (None, ""):
        return default
    field = serializers.IntegerField(min_value=1, max_value=maximum)
    try:
        return field.run_validation(raw)
    except serializers.ValidationError as exc:
        raise serializers.ValidationError({"limit": exc.detail})
