"""
Initial migration for the content app.

Creates the ``Resource`` model with its unique slug and the indexes used
by the listing filters.
"""
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Resource",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=200, unique=True)),
                ("description", models.TextField()),
                ("type", models.CharField(
                    choices=[
                        ("Tutorial", "Tutorial"),
                        ("Documentation", "Documentation"),
                        ("Tool", "Tool"),
                        ("Video", "Video"),
                    ],
                    max_length=20,
                )),
                ("category", models.CharField(max_length=100)),
                ("level", models.CharField(
                    choices=[
                        ("Beginner", "Beginner"),
                        ("Intermediate", "Intermediate"),
                        ("Advanced", "Advanced"),
                        ("All Levels", "All Levels"),
                    ],
                    max_length=20,
                )),
                ("duration", models.CharField(max_length=50)),
                ("author", models.CharField(max_length=100)),
                ("downloads", models.PositiveIntegerField(default=0)),
                ("rating", models.FloatField(validators=[
                    django.core.validators.MinValueValidator(0),
                    django.core.validators.MaxValueValidator(5),
                ])),
                ("students", models.PositiveIntegerField(default=0)),
                ("image", models.URLField(max_length=500)),
                ("resource_url", models.URLField(max_length=500)),
                ("provider", models.CharField(max_length=100)),
                ("tags", models.JSONField(blank=True, default=list, help_text="List of tags as strings")),
                ("featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-featured", "-created_at"],
                "indexes": [
                    models.Index(fields=["category"], name="resource_category_idx"),
                    models.Index(fields=["type", "level"], name="resource_type_level_idx"),
                    models.Index(fields=["-featured", "-created_at"], name="resource_featured_idx"),
                ],
            },
        ),
    ]
