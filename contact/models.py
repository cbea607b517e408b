"""Models for the contact app."""
from django.db import models
from django.utils import timezone


class ContactSubmission(models.Model):
    """A message sent through the public contact form."""
    full_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254)
    company = models.CharField(max_length=200, blank=True)
    subject = models.CharField(max_length=200)
    message = models.TextField()
    subscribe_newsletter = models.BooleanField(default=False)
    submitted_at = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(fields=["-submitted_at"], name="contact_submitted_idx"),
            models.Index(fields=["email"], name="contact_email_idx"),
        ]
        ordering = ["-submitted_at"]

    def __str__(self) -> str:
        return f"{self.full_name}: {self.subject}"
