from django.apps import AppConfig


class NewsletterConfig(AppConfig):
    """Configuration for the newsletter app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "newsletter"
