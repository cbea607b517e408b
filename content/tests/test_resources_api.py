"""
API tests for the resources hub.

Covers filtered pagination (total counts the whole filtered set), the
featured-first ordering, slug assignment with numeric suffixes, lookup by
slug and the public download counter.
"""
import pytest

from content.models import Resource

RESOURCE_PAYLOAD = {
    "title": "Intro to Solidity",
    "description": "Write your first contract.",
    "type": "Tutorial",
    "category": "Development",
    "level": "Beginner",
    "duration": "2 hours",
    "author": "Ada",
    "rating": 4.5,
    "students": 120,
    "image": "https://cdn.example.com/sol.png",
    "resourceUrl": "https://learn.example.com/solidity",
    "provider": "Web3 Academy",
    "tags": ["solidity", "ethereum"],
}

_counter = 0


def make_resource(**overrides):
    global _counter
    _counter += 1
    data = {
        "title": f"Resource {_counter}",
        "slug": f"resource-{_counter}",
        "description": "Learn things",
        "type": Resource.TYPE_TUTORIAL,
        "category": "Development",
        "level": Resource.LEVEL_BEGINNER,
        "duration": "1 hour",
        "author": "Grace",
        "rating": 4.0,
        "students": 10,
        "image": "https://cdn.example.com/r.png",
        "resource_url": "https://learn.example.com/r",
        "provider": "Academy",
    }
    data.update(overrides)
    return Resource.objects.create(**data)


@pytest.mark.django_db
def test_filtered_page_reports_full_total(client):
    for _ in range(7):
        make_resource()
    make_resource(level=Resource.LEVEL_ADVANCED)
    make_resource(type=Resource.TYPE_VIDEO)

    resp = client.get("/api/resources?type=Tutorial&level=Beginner&page=1&limit=5")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert len(data["resources"]) == 5
    assert data["total"] == 7
    assert data["hasMore"] is True
    assert all(r["type"] == "Tutorial" and r["level"] == "Beginner" for r in data["resources"])


@pytest.mark.django_db
def test_featured_resources_come_first(client):
    make_resource(title="Plain")
    make_resource(title="Star", featured=True)
    make_resource(title="Newest")

    titles = [r["title"] for r in client.get("/api/resources").json()["data"]["resources"]]
    assert titles == ["Star", "Newest", "Plain"]

    data = client.get("/api/resources?featured=true").json()["data"]
    assert [r["title"] for r in data["resources"]] == ["Star"]


@pytest.mark.django_db
def test_search_matches_tags(client):
    make_resource(title="Wallets", tags=["MetaMask", "security"])
    make_resource(title="Other")
    data = client.get("/api/resources?search=metamask").json()["data"]
    assert [r["title"] for r in data["resources"]] == ["Wallets"]


@pytest.mark.django_db
def test_slug_collisions_get_numeric_suffixes(auth_client):
    slugs = []
    for _ in range(3):
        resp = auth_client.post("/api/resources", RESOURCE_PAYLOAD, content_type="application/json")
        assert resp.status_code == 201
        slugs.append(resp.json()["data"]["slug"])
    assert slugs == ["intro-to-solidity", "intro-to-solidity-1", "intro-to-solidity-2"]


@pytest.mark.django_db
def test_client_slug_is_used_as_base(auth_client):
    make_resource(slug="custom")
    payload = dict(RESOURCE_PAYLOAD, slug="custom")
    resp = auth_client.post("/api/resources", payload, content_type="application/json")
    assert resp.json()["data"]["slug"] == "custom-1"


@pytest.mark.django_db
def test_title_update_rederives_slug(auth_client):
    resource = make_resource(title="Old name", slug="old-name")
    resp = auth_client.put(
        f"/api/resources/{resource.id}", {"title": "New Name!"}, content_type="application/json"
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["slug"] == "new-name"

    resp = auth_client.patch(
        f"/api/resources/{resource.id}", {"featured": True}, content_type="application/json"
    )
    assert resp.json()["data"]["slug"] == "new-name"


@pytest.mark.django_db
def test_get_resource_by_slug(client):
    make_resource(title="DeFi 101", slug="defi-101")
    resp = client.get("/api/resources/slug/defi-101")
    assert resp.status_code == 200
    assert resp.json()["data"]["title"] == "DeFi 101"

    resp = client.get("/api/resources/slug/missing")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Resource not found."


@pytest.mark.django_db
def test_download_counter_is_public_and_monotonic(client):
    resource = make_resource()
    first = client.post(f"/api/resources/{resource.id}/download")
    second = client.post(f"/api/resources/{resource.id}/download")
    assert first.status_code == 200
    assert first.json() == {"success": True, "data": {"downloads": 1}, "message": "Download tracked"}
    assert second.json()["data"]["downloads"] == 2

    resp = client.post("/api/resources/9999/download")
    assert resp.status_code == 404


@pytest.mark.django_db
def test_downloads_cannot_be_set_by_admin(auth_client):
    resource = make_resource()
    auth_client.patch(f"/api/resources/{resource.id}", {"downloads": 50}, content_type="application/json")
    resource.refresh_from_db()
    assert resource.downloads == 0
