"""
Slug derivation for titled content.

``slugify_title`` is a pure transform; ``unique_slug`` adds the collision
rule shared by every slugged model: the first free value among ``base``,
``base-1``, ``base-2`` and so on.  Serializers call these explicitly on
create and whenever an update carries a title.
"""
import re

from django.utils.text import slugify

FALLBACK_SLUG = "item"
MAX_SLUG_LENGTH = 200

_SEPARATORS_RE = re.compile(r"[-_\s]+")


def slugify_title(title: str) -> str:
    """Lowercase, ASCII-only, hyphen separated; never empty."""
    slug = slugify(title or "")
    slug = _SEPARATORS_RE.sub("-", slug).strip("-")
    return slug[:MAX_SLUG_LENGTH].rstrip("-") or FALLBACK_SLUG


def unique_slug(model, title: str, exclude_pk=None, field: str = "slug") -> str:
    """Return a slug for ``title`` that no other ``model`` row uses."""
    base = slugify_title(title)
    queryset = model._default_manager.all()
    if exclude_pk is not None:
        queryset = queryset.exclude(pk=exclude_pk)

    candidate = base
    suffix = 1
    while queryset.filter(**{field: candidate}).exists():
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate
