"""
ASGI entry point for the Web3 Economy API.

The default settings module is the development configuration; deployments
set ``DJANGO_SETTINGS_MODULE=web3economy.settings.prod``.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "web3economy.settings.dev")

application = get_asgi_application()
