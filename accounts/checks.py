"""
Startup checks for the accounts app.

Token verification cannot work without a signing secret, so a missing
``JWT_SECRET`` is reported as a system check error and Django refuses to
serve requests instead of failing on the first admin call.
"""
from django.conf import settings
from django.core.checks import Error, Tags, register


@register(Tags.security, deploy=False)
def check_jwt_secret(app_configs, **kwargs):
    if getattr(settings, "JWT_SECRET", ""):
        return []
    return [
        Error(
            "JWT_SECRET is not configured.",
            hint="Set JWT_SECRET in the environment or .env file.",
            id="accounts.E001",
        )
    ]
