"""
Models for the events app.

An ``Event`` is a community happening listed on the public calendar.
The ``date`` is kept as the display string entered by the editors (for
example "March 15-17, 2025"); listings sort on it first and then on
creation time, newest first.
"""
from django.db import models


class Event(models.Model):
    """A conference, workshop, meetup or similar happening."""
    TYPE_CONFERENCE = "Conference"
    TYPE_WORKSHOP = "Workshop"
    TYPE_HACKATHON = "Hackathon"
    TYPE_MEETUP = "Meetup"
    TYPE_WEBINAR = "Webinar"
    TYPE_SUMMIT = "Summit"
    TYPE_OTHER = "Other"
    TYPE_CHOICES = [
        (TYPE_CONFERENCE, "Conference"),
        (TYPE_WORKSHOP, "Workshop"),
        (TYPE_HACKATHON, "Hackathon"),
        (TYPE_MEETUP, "Meetup"),
        (TYPE_WEBINAR, "Webinar"),
        (TYPE_SUMMIT, "Summit"),
        (TYPE_OTHER, "Other"),
    ]

    STATUS_UPCOMING = "upcoming"
    STATUS_PAST = "past"
    STATUS_LIVE = "live"
    STATUS_CHOICES = [
        (STATUS_UPCOMING, "Upcoming"),
        (STATUS_PAST, "Past"),
        (STATUS_LIVE, "Live"),
    ]

    title = models.CharField(max_length=200)
    date = models.CharField(max_length=100)
    location = models.CharField(max_length=255)
    attendees = models.PositiveIntegerField(default=0)
    description = models.TextField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    price = models.CharField(max_length=50)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_UPCOMING)
    banner_image = models.URLField(max_length=500)
    registration_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["status", "date"], name="event_status_date_idx"),
            models.Index(fields=["type"], name="event_type_idx"),
        ]
        ordering = ["date", "-created_at"]

    def __str__(self) -> str:
        return f"{self.title} ({self.date})"
