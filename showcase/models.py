"""
Models for the showcase app.

``Showcase`` entries are community projects promoted on the showcase
page.  TVL is stored as a number (``tvl_usd``) and its display string is
derived from it; ``stats``/``links`` on the wire are nested views over
the flat columns.  ``recently_added`` starts true and is cleared by the
``expire_recently_added`` beat task once an entry is older than
``RECENTLY_ADDED_DAYS``.
"""
from datetime import timedelta

from django.db import models
from django.utils import timezone

from common.formatting import format_usd

RECENTLY_ADDED_DAYS = 30


class Showcase(models.Model):
    CATEGORY_CHOICES = [
        ("DeFi", "DeFi"),
        ("NFT", "NFT"),
        ("DAO", "DAO"),
        ("GameFi", "GameFi"),
        ("Infrastructure", "Infrastructure"),
        ("Social", "Social"),
        ("Tools", "Tools"),
        ("Other", "Other"),
    ]

    COLOR_MINT = "mint"
    COLOR_GOLD = "gold"
    COLOR_CHOICES = [(COLOR_MINT, "Mint"), (COLOR_GOLD, "Gold")]

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    description = models.TextField()
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    creator = models.CharField(max_length=100)
    image = models.URLField(max_length=500)
    tags = models.JSONField(default=list, blank=True)
    stars = models.PositiveIntegerField(default=0)
    users = models.CharField(max_length=50, default="0")
    tvl_usd = models.DecimalField(max_digits=20, decimal_places=2, default=0)
    website_url = models.URLField(max_length=500, blank=True)
    github_url = models.URLField(max_length=500, blank=True)
    twitter_url = models.URLField(max_length=500, blank=True)
    discord_url = models.URLField(max_length=500, blank=True)
    documentation_url = models.URLField(max_length=500, blank=True)
    featured = models.BooleanField(default=False)
    trending = models.BooleanField(default=False)
    recently_added = models.BooleanField(default=True)
    color = models.CharField(max_length=10, choices=COLOR_CHOICES, default=COLOR_MINT)
    published = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["category", "published"], name="showcase_category_idx"),
            models.Index(fields=["featured", "published"], name="showcase_featured_idx"),
            models.Index(fields=["trending", "published"], name="showcase_trending_idx"),
            models.Index(fields=["recently_added", "published"], name="showcase_recent_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    @property
    def tvl_display(self) -> str:
        return format_usd(self.tvl_usd)

    @classmethod
    def recently_added_cutoff(cls, now=None):
        return (now or timezone.now()) - timedelta(days=RECENTLY_ADDED_DAYS)
