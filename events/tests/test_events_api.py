"""
API tests for the events app.

Covers the public listing (filters, ordering, pagination envelope), the
admin-only write operations and the not-found and validation error
shapes.
"""
import pytest

from events.models import Event


def make_event(**overrides):
    data = {
        "title": "ETH Summit",
        "date": "March 15-17, 2025",
        "location": "Berlin",
        "attendees": 500,
        "description": "Three days of Ethereum talks.",
        "type": Event.TYPE_CONFERENCE,
        "price": "$299",
        "banner_image": "https://cdn.example.com/eth.png",
    }
    data.update(overrides)
    return Event.objects.create(**data)


EVENT_PAYLOAD = {
    "title": "Solidity Workshop",
    "date": "April 2, 2025",
    "location": "Online",
    "attendees": 40,
    "description": "Hands-on smart contract session.",
    "type": "Workshop",
    "price": "Free",
    "bannerImage": "https://cdn.example.com/sol.png",
}


@pytest.mark.django_db
def test_list_events_is_public_and_paginated(client):
    for i in range(3):
        make_event(title=f"Event {i}")

    resp = client.get("/api/events?limit=2")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Found 2 events"
    data = body["data"]
    assert len(data["events"]) == 2
    assert data["total"] == 3
    assert data["page"] == 1
    assert data["limit"] == 2
    assert data["hasMore"] is True
    assert resp["X-Total-Count"] == "3"

    last = client.get("/api/events?limit=2&page=2").json()["data"]
    assert len(last["events"]) == 1
    assert last["hasMore"] is False


@pytest.mark.django_db
def test_filter_events_by_status_and_type(client):
    make_event(title="Live hack", type=Event.TYPE_HACKATHON, status=Event.STATUS_LIVE)
    make_event(title="Old meetup", type=Event.TYPE_MEETUP, status=Event.STATUS_PAST)

    data = client.get("/api/events?status=live").json()["data"]
    assert [e["title"] for e in data["events"]] == ["Live hack"]

    data = client.get("/api/events?type=Meetup").json()["data"]
    assert [e["title"] for e in data["events"]] == ["Old meetup"]


@pytest.mark.django_db
def test_list_rejects_limit_above_maximum(client):
    resp = client.get("/api/events?limit=101")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.django_db
def test_create_requires_admin_token(client):
    resp = client.post("/api/events", EVENT_PAYLOAD, content_type="application/json")
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "AUTH_REQUIRED"
    assert Event.objects.count() == 0


@pytest.mark.django_db
def test_event_crud(auth_client):
    resp = auth_client.post("/api/events", EVENT_PAYLOAD, content_type="application/json")
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Event created successfully"
    event = body["data"]
    assert event["status"] == "upcoming"
    assert event["bannerImage"] == EVENT_PAYLOAD["bannerImage"]

    resp = auth_client.put(
        f"/api/events/{event['id']}", {"status": "live"}, content_type="application/json"
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["status"] == "live"
    assert updated["title"] == EVENT_PAYLOAD["title"]

    resp = auth_client.delete(f"/api/events/{event['id']}")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Event deleted successfully"

    resp = auth_client.get(f"/api/events/{event['id']}")
    assert resp.status_code == 404
    assert resp.json()["error"] == {"code": "NOT_FOUND", "message": "Event not found."}


@pytest.mark.django_db
def test_create_event_validation_details(auth_client):
    payload = dict(EVENT_PAYLOAD, type="Party", attendees=-1)
    resp = auth_client.post("/api/events", payload, content_type="application/json")
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Validation failed"
    assert any(detail.startswith("type:") for detail in error["details"])
    assert any(detail.startswith("attendees:") for detail in error["details"])
