"""WSGI entry point for the Web3 Economy API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "web3economy.settings.dev")

application = get_wsgi_application()
