"""
API tests for the blogs app.

Covers published-only visibility, the list projection without content,
read-time estimation, category and trending-tag aggregation, related
posts, the view-count side channel and the public counters.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from blogs.models import Blog

BLOG_PAYLOAD = {
    "title": "Getting Started with DAOs",
    "excerpt": "What a DAO is and how to join one.",
    "content": " ".join(["word"] * 450),
    "author": {"name": "Ada", "role": "Editor"},
    "category": "Guide",
    "image": "https://cdn.example.com/dao.png",
    "tags": ["dao", "governance"],
    "published": True,
}

_counter = 0


def make_blog(**overrides):
    global _counter
    _counter += 1
    data = {
        "title": f"Post {_counter}",
        "slug": f"post-{_counter}",
        "excerpt": "Excerpt",
        "content": "Body text",
        "author_name": "Grace",
        "read_time": "1 min read",
        "category": Blog.CATEGORY_NEWS,
        "image": "https://cdn.example.com/p.png",
        "published": True,
        "published_date": timezone.now() - timedelta(days=30 - _counter % 30),
    }
    data.update(overrides)
    return Blog.objects.create(**data)


@pytest.mark.django_db
def test_create_blog_estimates_read_time_and_slug(auth_client):
    resp = auth_client.post("/api/blogs", BLOG_PAYLOAD, content_type="application/json")
    assert resp.status_code == 201
    post = resp.json()["data"]
    assert post["readTime"] == "3 min read"
    assert post["slug"] == "getting-started-with-daos"
    assert post["author"] == {"name": "Ada", "role": "Editor", "bio": "", "avatar": ""}
    assert post["stats"] == {"likes": 0, "comments": 0, "bookmarks": 0, "views": 0}
    assert resp.json()["message"] == "Blog post created successfully"


@pytest.mark.django_db
def test_same_title_gets_suffixed_slug(auth_client):
    first = auth_client.post("/api/blogs", BLOG_PAYLOAD, content_type="application/json").json()["data"]
    second = auth_client.post("/api/blogs", BLOG_PAYLOAD, content_type="application/json").json()["data"]
    assert first["slug"] == "getting-started-with-daos"
    assert second["slug"] == "getting-started-with-daos-1"


@pytest.mark.django_db
def test_public_list_hides_drafts_and_content(client):
    make_blog(title="Live post")
    make_blog(title="Draft", published=False)

    resp = client.get("/api/blogs")
    data = resp.json()["data"]
    assert [p["title"] for p in data["posts"]] == ["Live post"]
    assert "content" not in data["posts"][0]
    assert data["limit"] == 10


@pytest.mark.django_db
def test_category_filter_is_case_insensitive_and_all_is_ignored(client):
    make_blog(category=Blog.CATEGORY_INDUSTRY_NEWS)
    make_blog(category=Blog.CATEGORY_GUIDE)

    assert client.get("/api/blogs?category=industry news").json()["data"]["total"] == 1
    assert client.get("/api/blogs?category=all").json()["data"]["total"] == 2


@pytest.mark.django_db
def test_popular_sort_orders_by_likes(client):
    make_blog(title="Few", likes=1)
    make_blog(title="Many", likes=50)
    titles = [p["title"] for p in client.get("/api/blogs?filter=popular").json()["data"]["posts"]]
    assert titles == ["Many", "Few"]


@pytest.mark.django_db
def test_featured_falls_back_to_latest(client):
    resp = client.get("/api/blogs/featured")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "No blog posts found."

    make_blog(title="Older", published_date=timezone.now() - timedelta(days=5))
    make_blog(title="Latest", published_date=timezone.now())
    assert client.get("/api/blogs/featured").json()["data"]["title"] == "Latest"

    make_blog(title="Pick", featured=True, published_date=timezone.now() - timedelta(days=9))
    assert client.get("/api/blogs/featured").json()["data"]["title"] == "Pick"


@pytest.mark.django_db
def test_categories_include_all_bucket(client):
    make_blog(category=Blog.CATEGORY_INDUSTRY_NEWS)
    make_blog(category=Blog.CATEGORY_INDUSTRY_NEWS)
    make_blog(category=Blog.CATEGORY_GUIDE)
    make_blog(category=Blog.CATEGORY_GUIDE, published=False)

    data = client.get("/api/blogs/categories").json()["data"]
    assert data == [
        {"id": "all", "name": "All Posts", "count": 3},
        {"id": "industry-news", "name": "Industry News", "count": 2},
        {"id": "guide", "name": "Guide", "count": 1},
    ]


@pytest.mark.django_db
def test_slug_read_survives_queue_outage(client, monkeypatch):
    post = make_blog(slug="offline", views=1)

    def broker_down(*args, **kwargs):
        raise ConnectionError("broker unreachable")

    monkeypatch.setattr("blogs.views.record_blog_view.delay", broker_down)
    resp = client.get("/api/blogs/slug/offline")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == post.pk
    post.refresh_from_db()
    assert post.views == 1


@pytest.mark.django_db
def test_trending_tags(client):
    make_blog(tags=["defi", "nft"])
    make_blog(tags=["defi"])
    make_blog(tags=["defi", "dao"], published=False)

    data = client.get("/api/blogs/trending").json()["data"]
    assert data[0] == {"name": "defi", "posts": 2}
    assert {"name": "nft", "posts": 1} in data
    assert all(t["name"] != "dao" for t in data)


@pytest.mark.django_db
def test_slug_read_counts_view_after_responding(client):
    post = make_blog(slug="hello-web3", views=4)

    resp = client.get("/api/blogs/slug/hello-web3")
    assert resp.status_code == 200
    assert resp.json()["data"]["stats"]["views"] == 4
    post.refresh_from_db()
    assert post.views == 5

    make_blog(slug="secret", published=False)
    assert client.get("/api/blogs/slug/secret").status_code == 404


@pytest.mark.django_db
def test_get_by_id_ignores_published_flag(client):
    draft = make_blog(published=False)
    assert client.get(f"/api/blogs/{draft.id}").status_code == 200


@pytest.mark.django_db
def test_related_posts_share_category_or_tag(client):
    base = make_blog(slug="base", category=Blog.CATEGORY_GUIDE, tags=["zk"])
    make_blog(title="Same category", category=Blog.CATEGORY_GUIDE)
    make_blog(title="Same tag", category=Blog.CATEGORY_NEWS, tags=["zk", "l2"])
    make_blog(title="Unrelated", category=Blog.CATEGORY_NEWS, tags=["nft"])

    data = client.get("/api/blogs/slug/base/related").json()["data"]
    titles = {p["title"] for p in data}
    assert titles == {"Same category", "Same tag"}
    assert base.id not in {p["id"] for p in data}
    assert set(data[0]) == {"id", "title", "category", "readTime", "slug", "image", "excerpt"}

    assert len(client.get("/api/blogs/slug/base/related?limit=1").json()["data"]) == 1


@pytest.mark.django_db
def test_like_bookmark_and_view_counters(client):
    post = make_blog()
    assert client.post(f"/api/blogs/{post.id}/like").json()["data"] == {"likes": 1}
    assert client.post(f"/api/blogs/{post.id}/like").json()["data"] == {"likes": 2}

    resp = client.post(f"/api/blogs/{post.id}/bookmark")
    assert resp.json() == {"success": True, "data": {"bookmarks": 1}, "message": "Blog post bookmarked"}

    assert client.post(f"/api/blogs/{post.id}/view").json()["data"] == {"views": 1}
    assert client.post("/api/blogs/9999/like").status_code == 404


@pytest.mark.django_db
def test_admin_list_requires_token(client):
    resp = client.get("/api/blogs/admin/all")
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "AUTH_REQUIRED"


@pytest.mark.django_db
def test_admin_list_includes_drafts(auth_client):
    make_blog(published=False)
    make_blog()

    data = auth_client.get("/api/blogs/admin/all").json()["data"]
    assert data["total"] == 2
    assert data["limit"] == 20

    data = auth_client.get("/api/blogs/admin/all?published=false").json()["data"]
    assert data["total"] == 1


@pytest.mark.django_db
def test_stats_are_not_writable(auth_client):
    post = make_blog()
    auth_client.patch(f"/api/blogs/{post.id}", {"stats": {"likes": 99}}, content_type="application/json")
    post.refresh_from_db()
    assert post.likes == 0
