"""
Atomic engagement counters.

Counters are bumped with a single ``UPDATE ... SET field = field + 1``
so concurrent callers never lose increments; the post-increment value is
read back inside the same transaction.
"""
from django.db import transaction
from django.db.models import F
from rest_framework.exceptions import NotFound


def increment(queryset, pk, field: str, not_found_message: str = "Resource not found.") -> int:
    """Add one to ``field`` on row ``pk`` and return the new value."""
    with transaction.atomic():
        updated = queryset.filter(pk=pk).update(**{field: F(field) + 1})
        if not updated:
            raise NotFound(not_found_message)
        return queryset.filter(pk=pk).values_list(field, flat=True).get()
