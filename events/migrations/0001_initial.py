"""
Initial migration for the events app.

Creates the ``Event`` model with its type/status choices and the
indexes used by the public listing filters.
"""
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("date", models.CharField(max_length=100)),
                ("location", models.CharField(max_length=255)),
                ("attendees", models.PositiveIntegerField(default=0)),
                ("description", models.TextField()),
                ("type", models.CharField(
                    choices=[
                        ("Conference", "Conference"),
                        ("Workshop", "Workshop"),
                        ("Hackathon", "Hackathon"),
                        ("Meetup", "Meetup"),
                        ("Webinar", "Webinar"),
                        ("Summit", "Summit"),
                        ("Other", "Other"),
                    ],
                    max_length=20,
                )),
                ("price", models.CharField(max_length=50)),
                ("status", models.CharField(
                    choices=[("upcoming", "Upcoming"), ("past", "Past"), ("live", "Live")],
                    default="upcoming",
                    max_length=10,
                )),
                ("banner_image", models.URLField(max_length=500)),
                ("registration_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["date", "-created_at"],
                "indexes": [
                    models.Index(fields=["status", "date"], name="event_status_date_idx"),
                    models.Index(fields=["type"], name="event_type_idx"),
                ],
            },
        ),
    ]
