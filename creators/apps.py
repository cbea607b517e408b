from django.apps import AppConfig


class CreatorsConfig(AppConfig):
    """Configuration for the creators app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "creators"
