from django.apps import AppConfig


class CommonConfig(AppConfig):
    """Shared helpers: envelope, pagination, throttling, slugs, search, email."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "common"
