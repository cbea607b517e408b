"""
Production settings for the Web3 Economy platform.

Extends the base settings by disabling debug mode, enforcing secure
cookies, and enabling HTTP Strict Transport Security.  ``JWT_SECRET``
must come from the environment; the accounts system check refuses to
start without it.
"""
from .base import *  # noqa

DEBUG = False
ENVIRONMENT = "production"

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = True

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
