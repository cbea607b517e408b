"""
Common test fixtures for the API tests.

Provides admin accounts, a Django test client authenticated with a
bearer token obtained from the login endpoint, and clears the cache
between tests so rate-limit counters never leak from one test into the
next.
"""
import pytest
from django.core.cache import cache

from accounts.models import AdminAccount
from accounts.tokens import issue_token

ADMIN_EMAIL = "admin@x.com"
ADMIN_PASSWORD = "Admin123!"


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_account(db):
    """Create a regular admin account."""
    return AdminAccount.objects.create_user(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, name="Site Admin")


@pytest.fixture
def superadmin(db):
    """Create a superadmin account."""
    return AdminAccount.objects.create_superuser(
        email="root@x.com", password="Root1234!", name="Super Admin"
    )


@pytest.fixture
def auth_client(client, db, admin_account):
    """Authenticate the Django test client with a bearer token from the login endpoint."""
    resp = client.post(
        "/api/admin/login",
        {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["data"]["token"]
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client


@pytest.fixture
def bearer():
    """Build an Authorization header value for any account."""
    def _bearer(account):
        return f"Bearer {issue_token(account)}"
    return _bearer
