# common/tasks.py
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


@shared_task
def send_email_task(to: str, subject: str, html: str) -> bool:
    """Deliver one HTML email with a plain-text alternative. Returns True when sent."""
    try:
        send_mail(
            subject=subject,
            message=strip_tags(html).strip(),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[to],
            html_message=html,
            fail_silently=False,
        )
    except Exception:
        logger.exception("Error sending email %r to %s", subject, to)
        return False
    logger.info("Email sent successfully to %s", to)
    return True
