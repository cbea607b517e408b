"""
Package initializer for the Web3 Economy backend.

The Celery application is imported here so that shared tasks use
`web3economy.celery_app` by default, avoiding duplicate worker setups.
"""
from .celery import celery_app  # noqa: F401

__all__ = ["celery_app"]
