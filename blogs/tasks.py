"""Celery tasks for the blogs app."""
import logging

from celery import shared_task
from django.db.models import F

logger = logging.getLogger(__name__)


@shared_task
def record_blog_view(blog_id: int) -> bool:
    """Count one view of a blog post. Returns False when the post is gone."""
    from .models import Blog

    updated = Blog.objects.filter(pk=blog_id).update(views=F("views") + 1)
    if not updated:
        logger.warning("View recorded for missing blog post %s", blog_id)
    return bool(updated)
