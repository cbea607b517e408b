from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Creator",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("bio", models.TextField()),
                ("profile_image", models.URLField(max_length=500)),
                ("social_media", models.JSONField(blank=True, default=list)),
                ("coin_symbol", models.CharField(max_length=10)),
                ("coin_market_cap", models.FloatField()),
                ("coin_price", models.FloatField()),
                ("coin_change_24h", models.FloatField()),
                ("followers", models.CharField(max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="creator_created_idx"),
                    models.Index(fields=["name"], name="creator_name_idx"),
                ],
            },
        ),
    ]
