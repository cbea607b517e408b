"""
Models for the blogs app.

A ``Blog`` post carries its author and engagement stats as flat columns
(``author_*`` and ``likes``/``comments``/``bookmarks``/``views``); the
serializer nests them as ``author`` and ``stats``.  Posts are hidden from
the public endpoints until ``published`` is set.
"""
from django.db import models
from django.utils import timezone


class Blog(models.Model):
    CATEGORY_NEWS = "News"
    CATEGORY_TUTORIAL = "Tutorial"
    CATEGORY_GUIDE = "Guide"
    CATEGORY_INDUSTRY_NEWS = "Industry News"
    CATEGORY_ANALYSIS = "Analysis"
    CATEGORY_UPDATES = "Updates"
    CATEGORY_CHOICES = [
        (CATEGORY_NEWS, "News"),
        (CATEGORY_TUTORIAL, "Tutorial"),
        (CATEGORY_GUIDE, "Guide"),
        (CATEGORY_INDUSTRY_NEWS, "Industry News"),
        (CATEGORY_ANALYSIS, "Analysis"),
        (CATEGORY_UPDATES, "Updates"),
    ]

    COLOR_MINT = "mint"
    COLOR_GOLD = "gold"
    COLOR_CHOICES = [(COLOR_MINT, "Mint"), (COLOR_GOLD, "Gold")]

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    excerpt = models.CharField(max_length=500)
    content = models.TextField()
    author_name = models.CharField(max_length=100)
    author_role = models.CharField(max_length=100, blank=True)
    author_bio = models.TextField(blank=True)
    author_avatar = models.URLField(max_length=500, blank=True)
    published_date = models.DateTimeField(default=timezone.now)
    read_time = models.CharField(max_length=50)
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES)
    image = models.URLField(max_length=500)
    tags = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False)
    published = models.BooleanField(default=False)
    likes = models.PositiveIntegerField(default=0)
    comments = models.PositiveIntegerField(default=0)
    bookmarks = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)
    color = models.CharField(max_length=10, choices=COLOR_CHOICES, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["published", "-published_date"], name="blog_published_idx"),
            models.Index(fields=["category"], name="blog_category_idx"),
            models.Index(fields=["featured"], name="blog_featured_idx"),
        ]
        ordering = ["-published_date", "-created_at"]

    def __str__(self) -> str:
        return self.title
