"""
API tests for the creators app.

Checks the nested ``creatorCoin`` and ``socialMedia`` shapes, input
normalisation (symbol upper-cased, platform lower-cased), search and
partial updates of the nested coin.
"""
import pytest

from creators.models import Creator

CREATOR_PAYLOAD = {
    "name": "Ada Builder",
    "bio": "Writes about zero-knowledge proofs.",
    "profileImage": "https://cdn.example.com/ada.png",
    "socialMedia": [{"platform": "Twitter", "url": "https://twitter.com/ada"}],
    "creatorCoin": {"symbol": "ada", "marketCap": 1200000, "price": 1.5, "change24h": -2.5},
    "followers": "12.5K",
}


def make_creator(**overrides):
    data = {
        "name": "Grace",
        "bio": "DeFi researcher",
        "profile_image": "https://cdn.example.com/grace.png",
        "coin_symbol": "GRC",
        "coin_market_cap": 1000.0,
        "coin_price": 0.1,
        "coin_change_24h": 3.0,
        "followers": "1K",
    }
    data.update(overrides)
    return Creator.objects.create(**data)


@pytest.mark.django_db
def test_create_creator_normalises_nested_fields(auth_client):
    resp = auth_client.post("/api/creators", CREATOR_PAYLOAD, content_type="application/json")
    assert resp.status_code == 201
    creator = resp.json()["data"]
    assert creator["creatorCoin"] == {
        "symbol": "ADA", "marketCap": 1200000.0, "price": 1.5, "change24h": -2.5,
    }
    assert creator["socialMedia"] == [{"platform": "twitter", "url": "https://twitter.com/ada"}]
    assert Creator.objects.get().coin_symbol == "ADA"


@pytest.mark.django_db
def test_create_creator_requires_coin(auth_client):
    payload = {k: v for k, v in CREATOR_PAYLOAD.items() if k != "creatorCoin"}
    resp = auth_client.post("/api/creators", payload, content_type="application/json")
    assert resp.status_code == 400
    assert any(d.startswith("creatorCoin") for d in resp.json()["error"]["details"])


@pytest.mark.django_db
def test_partial_update_of_coin_keeps_other_figures(auth_client):
    creator = make_creator()
    resp = auth_client.patch(
        f"/api/creators/{creator.id}", {"creatorCoin": {"price": 0.25}}, content_type="application/json"
    )
    assert resp.status_code == 200
    coin = resp.json()["data"]["creatorCoin"]
    assert coin["price"] == 0.25
    assert coin["symbol"] == "GRC"
    assert coin["marketCap"] == 1000.0


@pytest.mark.django_db
def test_search_creators_by_name_or_bio(client):
    make_creator(name="Grace", bio="DeFi researcher")
    make_creator(name="Linus", bio="NFT artist")

    data = client.get("/api/creators?search=nft").json()["data"]
    assert [c["name"] for c in data["creators"]] == ["Linus"]
    assert data["total"] == 1


@pytest.mark.django_db
def test_creators_listed_newest_first(client):
    make_creator(name="First")
    make_creator(name="Second")
    names = [c["name"] for c in client.get("/api/creators").json()["data"]["creators"]]
    assert names == ["Second", "First"]


@pytest.mark.django_db
def test_delete_unknown_creator_is_404(auth_client):
    resp = auth_client.delete("/api/creators/999")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Creator not found."
