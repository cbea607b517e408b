import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Subscriber",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("source", models.CharField(default="direct", max_length=50)),
                ("status", models.CharField(
                    choices=[("active", "Active"), ("unsubscribed", "Unsubscribed")],
                    default="active",
                    max_length=20,
                )),
                ("subscribed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("unsubscribed_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-subscribed_at"],
                "indexes": [
                    models.Index(fields=["status", "-subscribed_at"], name="subscriber_status_idx"),
                ],
            },
        ),
    ]
