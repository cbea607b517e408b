"""Celery tasks for the showcase app."""
import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def expire_recently_added() -> int:
    """Clear ``recently_added`` on entries older than the cutoff. Returns the count."""
    from .models import Showcase

    cutoff = Showcase.recently_added_cutoff()
    expired = Showcase.objects.filter(recently_added=True, created_at__lt=cutoff).update(recently_added=False)
    if expired:
        logger.info("Cleared recentlyAdded on %s showcase projects", expired)
    return expired
