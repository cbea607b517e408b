from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BuilderProject",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("creator", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("tech", models.JSONField(default=list)),
                ("status", models.CharField(
                    choices=[
                        ("Live", "Live"),
                        ("Beta", "Beta"),
                        ("Development", "Development"),
                        ("Alpha", "Alpha"),
                        ("Deprecated", "Deprecated"),
                    ],
                    max_length=20,
                )),
                ("users", models.CharField(max_length=50)),
                ("tvl", models.CharField(max_length=50)),
                ("image", models.URLField(max_length=500)),
                ("github_url", models.URLField(max_length=500)),
                ("social_media", models.JSONField(blank=True, default=list)),
                ("website_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "builder_projects",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="builder_status_idx"),
                    models.Index(fields=["-created_at"], name="builder_created_idx"),
                ],
            },
        ),
    ]
