"""
Query helpers shared by the list endpoints.

Full-text search uses PostgreSQL's ``SearchVector``/``SearchQuery`` when
the queryset's database supports it and falls back to case-insensitive
substring matching elsewhere (the SQLite test database).  Tag and tech
lists are stored as JSON arrays; membership uses ``__contains`` where the
backend supports it and a quoted substring match otherwise.  Tallies unwind
the arrays with ``jsonb_array_elements_text`` on PostgreSQL and count in
Python elsewhere.
"""
import json
from collections import Counter
from functools import reduce
from operator import or_

from django.contrib.postgres.search import SearchQuery, SearchVector
from django.db import connections
from django.db.models import Q


def _connection(queryset):
    return connections[queryset.db]


def any_icontains(fields, term):
    return reduce(or_, (Q(**{f"{field}__icontains": term}) for field in fields))


def text_search(queryset, fields, term):
    """Filter ``queryset`` to rows matching ``term`` in any of ``fields``."""
    term = (term or "").strip()
    if not term:
        return queryset
    if _connection(queryset).vendor == "postgresql":
        return queryset.annotate(search_vector=SearchVector(*fields)).filter(
            search_vector=SearchQuery(term, search_type="websearch")
        )
    return queryset.filter(any_icontains(fields, term))


def json_list_contains_q(queryset, field, values):
    """
    Q object matching rows whose JSON array ``field`` holds any of ``values``.

    Returns ``None`` when ``values`` is empty.
    """
    values = [v for v in values if v]
    if not values:
        return None
    if _connection(queryset).features.supports_json_field_contains:
        return reduce(or_, (Q(**{f"{field}__contains": [v]}) for v in values))
    return reduce(or_, (Q(**{f"{field}__icontains": json.dumps(v)}) for v in values))


def json_list_contains_any(queryset, field, values):
    """Rows whose JSON array ``field`` holds at least one of ``values``."""
    condition = json_list_contains_q(queryset, field, values)
    return queryset if condition is None else queryset.filter(condition)


def json_list_contains(queryset, field, value):
    return json_list_contains_any(queryset, field, [value])


def category_filter(queryset, name, value):
    """Filter method: case-insensitive exact match where ``all`` means everything."""
    if not value or value.lower() == "all":
        return queryset
    return queryset.filter(**{f"{name}__iexact": value})


def json_list_tally(queryset, field, limit):
    """
    Most common entries of the JSON array ``field`` as ``(value, rows)``
    pairs; a row counts once per distinct value it holds.
    """
    queryset = queryset.order_by()
    connection = _connection(queryset)
    if connection.vendor != "postgresql":
        tally = Counter()
        for values in queryset.values_list(field, flat=True):
            tally.update(set(values or []))
        return tally.most_common(limit)

    meta = queryset.model._meta
    pk = connection.ops.quote_name(meta.pk.column)
    column = connection.ops.quote_name(meta.get_field(field).column)
    inner, params = queryset.values_list("pk", field).query.sql_with_params()
    sql = (
        "SELECT item, COUNT(*) AS hits FROM ("
        f"SELECT DISTINCT s.{pk}, jsonb_array_elements_text(s.{column}) AS item FROM ({inner}) s"
        ") t GROUP BY item ORDER BY hits DESC, item LIMIT %s"
    )
    with connection.cursor() as cursor:
        cursor.execute(sql, (*params, limit))
        return [tuple(row) for row in cursor.fetchall()]
