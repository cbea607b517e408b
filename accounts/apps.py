from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    Configuration for the accounts app.

    The ready() hook imports the checks module so the signing-secret
    check runs with every management command, including runserver.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"

    def ready(self) -> None:
        from . import checks  # noqa: F401
