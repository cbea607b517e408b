from django.apps import AppConfig


class ShowcaseConfig(AppConfig):
    """Configuration for the showcase app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "showcase"
