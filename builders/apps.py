from django.apps import AppConfig


class BuildersConfig(AppConfig):
    """Configuration for the builders app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "builders"
