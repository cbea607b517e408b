"""
Models for the builders app.

``BuilderProject`` records a project built by the community.  ``users``
and ``tvl`` are display strings maintained by the editors; the numeric
TVL used for aggregation lives on the showcase entries instead.
"""
from django.db import models


class BuilderProject(models.Model):
    STATUS_LIVE = "Live"
    STATUS_BETA = "Beta"
    STATUS_DEVELOPMENT = "Development"
    STATUS_ALPHA = "Alpha"
    STATUS_DEPRECATED = "Deprecated"
    STATUS_CHOICES = [
        (STATUS_LIVE, "Live"),
        (STATUS_BETA, "Beta"),
        (STATUS_DEVELOPMENT, "Development"),
        (STATUS_ALPHA, "Alpha"),
        (STATUS_DEPRECATED, "Deprecated"),
    ]

    title = models.CharField(max_length=200)
    creator = models.CharField(max_length=100)
    description = models.TextField()
    tech = models.JSONField(default=list)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES)
    users = models.CharField(max_length=50)
    tvl = models.CharField(max_length=50)
    image = models.URLField(max_length=500)
    github_url = models.URLField(max_length=500)
    social_media = models.JSONField(default=list, blank=True)
    website_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "builder_projects"
        indexes = [
            models.Index(fields=["status"], name="builder_status_idx"),
            models.Index(fields=["-created_at"], name="builder_created_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title
