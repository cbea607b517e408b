"""
Best-effort notification emails.

Messages are rendered from ``common/templates/emails`` and handed to the
``send_email_task`` Celery task.  Queueing failures (broker down, template
error) are logged and swallowed: the request that triggered the email has
already succeeded and must not fail because of it.
"""
import logging

from django.conf import settings
from django.template.loader import render_to_string

from .tasks import send_email_task

logger = logging.getLogger(__name__)


def send_templated_email(to: str, subject: str, template: str, context=None) -> bool:
    try:
        html = render_to_string(f"emails/{template}", {"site_name": settings.FROM_NAME, **(context or {})})
        send_email_task.delay(to=to, subject=subject, html=html)
    except Exception as e:
        logger.error(f"Error queueing email {subject!r} to {to}: {e}")
        return False
    return True
