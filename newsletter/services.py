"""
Subscription state changes for the newsletter.

``subscribe`` and ``unsubscribe`` are used by the newsletter endpoints
and by the contact form.  Each runs in a transaction and locks the
existing row, so two concurrent calls for the same address cannot both
reactivate it or both create it.
"""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from .models import Subscriber

logger = logging.getLogger(__name__)

CREATED = "created"
REACTIVATED = "reactivated"
ALREADY_ACTIVE = "already_active"
UNSUBSCRIBED = "unsubscribed"
ALREADY_UNSUBSCRIBED = "already_unsubscribed"


def subscribe(email: str, source: str = None):
    """
    Subscribe ``email`` (already normalised).

    Returns ``(subscriber, outcome)`` where outcome is one of
    ``CREATED``, ``REACTIVATED`` or ``ALREADY_ACTIVE``.
    """
    with transaction.atomic():
        subscriber = Subscriber.objects.select_for_update().filter(email=email).first()
        if subscriber is None:
            try:
                with transaction.atomic():
                    subscriber = Subscriber.objects.create(email=email, source=source or Subscriber.SOURCE_DIRECT)
            except IntegrityError:
                # lost a race with a concurrent insert
                subscriber = Subscriber.objects.select_for_update().get(email=email)
            else:
                logger.info("New newsletter subscriber %s via %s", email, subscriber.source)
                return subscriber, CREATED

        if subscriber.is_active:
            return subscriber, ALREADY_ACTIVE

        subscriber.status = Subscriber.STATUS_ACTIVE
        subscriber.subscribed_at = timezone.now()
        subscriber.unsubscribed_at = None
        subscriber.source = source or subscriber.source
        subscriber.save(update_fields=["status", "subscribed_at", "unsubscribed_at", "source"])
        logger.info("Newsletter subscriber %s reactivated via %s", email, subscriber.source)
        return subscriber, REACTIVATED


def unsubscribe(email: str):
    """
    Unsubscribe ``email``. Returns ``(subscriber, outcome)``.

    Raises ``NotFound`` when the address never subscribed.
    """
    with transaction.atomic():
        subscriber = Subscriber.objects.select_for_update().filter(email=email).first()
        if subscriber is None:
            raise NotFound("Email not found in our newsletter list.")
        if not subscriber.is_active:
            return subscriber, ALREADY_UNSUBSCRIBED

        subscriber.status = Subscriber.STATUS_UNSUBSCRIBED
        subscriber.unsubscribed_at = timezone.now()
        subscriber.save(update_fields=["status", "unsubscribed_at"])
        logger.info("Newsletter subscriber %s unsubscribed", email)
        return subscriber, UNSUBSCRIBED
