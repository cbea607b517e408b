"""
Development settings for the Web3 Economy platform.

Extends the base settings by enabling debugging and allowing all hosts.  Do
not use these settings in production.
"""
from .base import *  # noqa
import os

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
JWT_SECRET = JWT_SECRET or "dev-insecure-jwt-secret"  # noqa: F405
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
LOGGING["root"]["level"] = "DEBUG"  # noqa: F405
