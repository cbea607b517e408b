import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Blog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=200, unique=True)),
                ("excerpt", models.CharField(max_length=500)),
                ("content", models.TextField()),
                ("author_name", models.CharField(max_length=100)),
                ("author_role", models.CharField(blank=True, max_length=100)),
                ("author_bio", models.TextField(blank=True)),
                ("author_avatar", models.URLField(blank=True, max_length=500)),
                ("published_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("read_time", models.CharField(max_length=50)),
                ("category", models.CharField(
                    choices=[
                        ("News", "News"),
                        ("Tutorial", "Tutorial"),
                        ("Guide", "Guide"),
                        ("Industry News", "Industry News"),
                        ("Analysis", "Analysis"),
                        ("Updates", "Updates"),
                    ],
                    max_length=30,
                )),
                ("image", models.URLField(max_length=500)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("featured", models.BooleanField(default=False)),
                ("published", models.BooleanField(default=False)),
                ("likes", models.PositiveIntegerField(default=0)),
                ("comments", models.PositiveIntegerField(default=0)),
                ("bookmarks", models.PositiveIntegerField(default=0)),
                ("views", models.PositiveIntegerField(default=0)),
                ("color", models.CharField(blank=True, choices=[("mint", "Mint"), ("gold", "Gold")], max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-published_date", "-created_at"],
                "indexes": [
                    models.Index(fields=["published", "-published_date"], name="blog_published_idx"),
                    models.Index(fields=["category"], name="blog_category_idx"),
                    models.Index(fields=["featured"], name="blog_featured_idx"),
                ],
            },
        ),
    ]
