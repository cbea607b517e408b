"""Helpers for blog posts."""
import math

WORDS_PER_MINUTE = 200


def estimate_read_time(content: str) -> str:
    """Return a label such as ``"3 min read"`` for ``content``."""
    words = len((content or "").split())
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def category_id(name: str) -> str:
    """``"Industry News"`` -> ``"industry-news"``."""
    return "-".join(name.lower().split())
