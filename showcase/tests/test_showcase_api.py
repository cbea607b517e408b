"""
API tests for the showcase app.

Covers the star counter, quick filters and sorting, category counts,
the derived TVL display string, headline statistics and the task that
expires the recently-added flag.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from showcase.models import Showcase
from showcase.tasks import expire_recently_added

_counter = 0


def make_project(**overrides):
    global _counter
    _counter += 1
    data = {
        "title": f"Project {_counter}",
        "slug": f"project-{_counter}",
        "description": "A web3 project",
        "category": "DeFi",
        "creator": "Ada",
        "image": "https://cdn.example.com/p.png",
        "published": True,
    }
    data.update(overrides)
    return Showcase.objects.create(**data)


@pytest.mark.django_db
def test_starring_twice_adds_two(client):
    project = make_project()
    client.post(f"/api/showcase/{project.id}/star")
    resp = client.post(f"/api/showcase/{project.id}/star")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": {"stars": 2}, "message": "Project starred"}

    data = client.get(f"/api/showcase/{project.id}").json()["data"]
    assert data["stats"]["stars"] == 2


@pytest.mark.django_db
def test_create_derives_tvl_display(auth_client):
    payload = {
        "title": "Yield Aggregator",
        "description": "Auto-compounding vaults",
        "category": "DeFi",
        "creator": "Grace",
        "image": "https://cdn.example.com/y.png",
        "stats": {"users": "10K", "tvlUsd": 2500000},
        "links": {"github": "https://github.com/grace/yield"},
    }
    resp = auth_client.post("/api/showcase", payload, content_type="application/json")
    assert resp.status_code == 201
    project = resp.json()["data"]
    assert project["slug"] == "yield-aggregator"
    assert project["stats"] == {"stars": 0, "users": "10K", "tvlUsd": 2500000.0, "tvl": "$2.5M"}
    assert project["links"]["github"] == "https://github.com/grace/yield"
    assert project["links"]["website"] == ""
    assert project["recentlyAdded"] is True
    assert project["color"] == "mint"
    assert project["published"] is False


@pytest.mark.django_db
def test_public_list_only_published_with_default_limit(client):
    make_project(title="Visible")
    make_project(title="Hidden", published=False)
    data = client.get("/api/showcase").json()["data"]
    assert [p["title"] for p in data["projects"]] == ["Visible"]
    assert data["limit"] == 12


@pytest.mark.django_db
def test_quick_filters(client):
    make_project(title="Hot", trending=True, stars=5)
    make_project(title="Hotter", trending=True, stars=50)
    make_project(title="Pick", featured=True, recently_added=False)

    data = client.get("/api/showcase?filter=trending").json()["data"]
    assert [p["title"] for p in data["projects"]] == ["Hotter", "Hot"]

    data = client.get("/api/showcase?filter=featured").json()["data"]
    assert [p["title"] for p in data["projects"]] == ["Pick"]

    data = client.get("/api/showcase?filter=new").json()["data"]
    assert sorted(p["title"] for p in data["projects"]) == ["Hot", "Hotter"]

    resp = client.get("/api/showcase?filter=bogus")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_category_and_tag_filters(client):
    make_project(title="Game", category="GameFi", tags=["play"])
    make_project(title="Vault", category="DeFi", tags=["yield"])

    data = client.get("/api/showcase?category=gamefi").json()["data"]
    assert [p["title"] for p in data["projects"]] == ["Game"]
    data = client.get("/api/showcase?tag=yield").json()["data"]
    assert [p["title"] for p in data["projects"]] == ["Vault"]


@pytest.mark.django_db
def test_categories_lowercase_ids(client):
    make_project(category="DeFi")
    make_project(category="DeFi")
    make_project(category="NFT")
    data = client.get("/api/showcase/categories").json()["data"]
    assert data == [
        {"id": "all", "name": "All Projects", "count": 3},
        {"id": "defi", "name": "DeFi", "count": 2},
        {"id": "nft", "name": "NFT", "count": 1},
    ]


@pytest.mark.django_db
def test_stats_are_formatted(client):
    make_project(creator="Ada", stars=1200, tvl_usd=Decimal("1500000"))
    make_project(creator="Ada", stars=300, tvl_usd=Decimal("1000000"))
    make_project(creator="Grace", stars=0, tvl_usd=Decimal("0"))
    make_project(creator="Hidden", stars=10000, tvl_usd=Decimal("9000000"), published=False)

    data = client.get("/api/showcase/stats").json()["data"]
    assert data == [
        {"label": "Total Projects", "value": "3+", "icon": "Layers"},
        {"label": "Active Builders", "value": "2+", "icon": "Users"},
        {"label": "Combined TVL", "value": "$2.5M", "icon": "TrendingUp"},
        {"label": "GitHub Stars", "value": "2K+", "icon": "Star"},
    ]


@pytest.mark.django_db
def test_featured_endpoint_sorted_by_stars(client):
    make_project(title="Low", featured=True, stars=1)
    make_project(title="High", featured=True, stars=9)
    make_project(title="Not featured", stars=100)

    data = client.get("/api/showcase/featured").json()["data"]
    assert [p["title"] for p in data] == ["High", "Low"]
    assert len(client.get("/api/showcase/featured?limit=1").json()["data"]) == 1


@pytest.mark.django_db
def test_slug_lookup_requires_published(client):
    make_project(slug="open")
    make_project(slug="draft", published=False)
    assert client.get("/api/showcase/slug/open").status_code == 200
    resp = client.get("/api/showcase/slug/draft")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Project not found."


@pytest.mark.django_db
def test_admin_all_lists_drafts(auth_client):
    make_project(published=False)
    make_project()
    data = auth_client.get("/api/showcase/admin/all").json()["data"]
    assert data["total"] == 2
    assert auth_client.get("/api/showcase/admin/all?published=true").json()["data"]["total"] == 1


@pytest.mark.django_db
def test_expire_recently_added():
    old = make_project()
    fresh = make_project()
    Showcase.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=31))

    assert expire_recently_added() == 1
    old.refresh_from_db()
    fresh.refresh_from_db()
    assert old.recently_added is False
    assert fresh.recently_added is True
