"""
Models for the content app.

The ``Resource`` model represents a learning resource such as a
tutorial, a documentation set, a tool or a video course.  Resources are
addressable by a unique ``slug`` derived from the title (see
``common.slugs``) and count public downloads in ``downloads``.  Tags are
stored as a JSON array so they can be filtered on any database backend.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Resource(models.Model):
    """A tutorial, documentation set, tool or video."""
    TYPE_TUTORIAL = "Tutorial"
    TYPE_DOCUMENTATION = "Documentation"
    TYPE_TOOL = "Tool"
    TYPE_VIDEO = "Video"
    TYPE_CHOICES = [
        (TYPE_TUTORIAL, "Tutorial"),
        (TYPE_DOCUMENTATION, "Documentation"),
        (TYPE_TOOL, "Tool"),
        (TYPE_VIDEO, "Video"),
    ]

    LEVEL_BEGINNER = "Beginner"
    LEVEL_INTERMEDIATE = "Intermediate"
    LEVEL_ADVANCED = "Advanced"
    LEVEL_ALL = "All Levels"
    LEVEL_CHOICES = [
        (LEVEL_BEGINNER, "Beginner"),
        (LEVEL_INTERMEDIATE, "Intermediate"),
        (LEVEL_ADVANCED, "Advanced"),
        (LEVEL_ALL, "All Levels"),
    ]

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    description = models.TextField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    category = models.CharField(max_length=100)
    level = models.CharField(max_length=20, choices=LEVEL_CHOICES)
    duration = models.CharField(max_length=50)
    author = models.CharField(max_length=100)
    downloads = models.PositiveIntegerField(default=0)
    rating = models.FloatField(validators=[MinValueValidator(0), MaxValueValidator(5)])
    students = models.PositiveIntegerField(default=0)
    image = models.URLField(max_length=500)
    resource_url = models.URLField(max_length=500)
    provider = models.CharField(max_length=100)
    tags = models.JSONField(default=list, blank=True, help_text="List of tags as strings")
    featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["category"], name="resource_category_idx"),
            models.Index(fields=["type", "level"], name="resource_type_level_idx"),
            models.Index(fields=["-featured", "-created_at"], name="resource_featured_idx"),
        ]
        ordering = ["-featured", "-created_at"]

    def __str__(self) -> str:
        return self.title
