from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Showcase",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=200, unique=True)),
                ("description", models.TextField()),
                ("category", models.CharField(
                    choices=[
                        ("DeFi", "DeFi"),
                        ("NFT", "NFT"),
                        ("DAO", "DAO"),
                        ("GameFi", "GameFi"),
                        ("Infrastructure", "Infrastructure"),
                        ("Social", "Social"),
                        ("Tools", "Tools"),
                        ("Other", "Other"),
                    ],
                    max_length=20,
                )),
                ("creator", models.CharField(max_length=100)),
                ("image", models.URLField(max_length=500)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("stars", models.PositiveIntegerField(default=0)),
                ("users", models.CharField(default="0", max_length=50)),
                ("tvl_usd", models.DecimalField(decimal_places=2, default=0, max_digits=20)),
                ("website_url", models.URLField(blank=True, max_length=500)),
                ("github_url", models.URLField(blank=True, max_length=500)),
                ("twitter_url", models.URLField(blank=True, max_length=500)),
                ("discord_url", models.URLField(blank=True, max_length=500)),
                ("documentation_url", models.URLField(blank=True, max_length=500)),
                ("featured", models.BooleanField(default=False)),
                ("trending", models.BooleanField(default=False)),
                ("recently_added", models.BooleanField(default=True)),
                ("color", models.CharField(choices=[("mint", "Mint"), ("gold", "Gold")], default="mint", max_length=10)),
                ("published", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["category", "published"], name="showcase_category_idx"),
                    models.Index(fields=["featured", "published"], name="showcase_featured_idx"),
                    models.Index(fields=["trending", "published"], name="showcase_trending_idx"),
                    models.Index(fields=["recently_added", "published"], name="showcase_recent_idx"),
                ],
            },
        ),
    ]
