"""
Models for the newsletter app.

One ``Subscriber`` row exists per case-folded email address.
Unsubscribing flips ``status`` and stamps ``unsubscribed_at``; the row
is kept so a later subscribe reactivates it.
"""
from django.db import models
from django.utils import timezone


class Subscriber(models.Model):
    STATUS_ACTIVE = "active"
    STATUS_UNSUBSCRIBED = "unsubscribed"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_UNSUBSCRIBED, "Unsubscribed"),
    ]

    SOURCE_DIRECT = "direct"
    SOURCE_CONTACT_FORM = "contact_form"

    email = models.EmailField(max_length=254, unique=True)
    source = models.CharField(max_length=50, default=SOURCE_DIRECT)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    subscribed_at = models.DateTimeField(default=timezone.now)
    unsubscribed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=["status", "-subscribed_at"], name="subscriber_status_idx"),
        ]
        ordering = ["-subscribed_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.status})"

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE
