"""
Tests for the service endpoints (root, API index, health), the JSON 404
page and the shared list pagination contract.
"""
import pytest
from django.core.management import call_command

from creators.models import Creator


def _creator(name):
    return Creator.objects.create(
        name=name,
        bio="bio",
        profile_image="https://cdn.example.com/p.png",
        coin_symbol="ABC",
        coin_market_cap=1.0,
        coin_price=1.0,
        coin_change_24h=0.0,
        followers="1K",
    )


@pytest.mark.django_db
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["database"] == "connected"
    assert body["environment"] == "test"
    assert body["timestamp"]


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {
        "name": "Web3 Economy API",
        "version": "1.0.0",
        "status": "running",
        "documentation": "/api",
        "health": "/health",
    }


def test_api_index_lists_endpoints(client):
    resp = client.get("/api")
    assert resp.status_code == 200
    endpoints = resp.json()["endpoints"]
    assert endpoints["admin"]["login"] == "POST /api/admin/login"
    assert set(endpoints) >= {"events", "creators", "builders", "resources", "blogs", "showcase", "contact", "newsletter"}


def test_unknown_path_is_json_404(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {
        "success": False,
        "error": {"code": "NOT_FOUND", "message": "The requested endpoint was not found."},
    }


@pytest.mark.django_db
def test_pagination_envelope_and_headers(client):
    for name in ("One", "Two", "Three"):
        _creator(name)

    resp = client.get("/api/creators", {"page": 2, "limit": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Found 1 creators"
    data = body["data"]
    assert len(data["creators"]) == 1
    assert data["total"] == 3
    assert data["page"] == 2
    assert data["limit"] == 2
    assert data["hasMore"] is False
    assert resp["X-Total-Count"] == "3"
    assert resp["X-Page"] == "2"
    assert resp["X-Limit"] == "2"


@pytest.mark.django_db
def test_first_page_has_more(client):
    for name in ("One", "Two", "Three"):
        _creator(name)
    data = client.get("/api/creators", {"limit": 2}).json()["data"]
    assert data["hasMore"] is True
    assert [c["name"] for c in data["creators"]] == ["Three", "Two"]


@pytest.mark.django_db
@pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"page": 0}, {"page": "abc"}])
def test_invalid_page_parameters(client, params):
    resp = client.get("/api/creators", params)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.django_db
def test_unknown_id_is_not_found(client):
    resp = client.get("/api/creators/999")
    assert resp.status_code == 404
    assert resp.json()["error"] == {"code": "NOT_FOUND", "message": "Creator not found."}


@pytest.mark.django_db
def test_malformed_json_body(auth_client):
    resp = auth_client.post("/api/creators", "{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_JSON"


@pytest.mark.django_db
def test_system_checks_pass():
    # Loads every URLconf, view and DRF setting the way a request would
    call_command("check")
