"""
Tests for the shared calendar and its Google sync hook.
"""
from usandours.core.exceptions import UpstreamError
from usandours.models.user import User
from usandours.services import calendar_service


def test_create_and_list_events(couple_clients):
    alice, bob, _ = couple_clients

    response = alice.post("/events", json={"title": "Anniversary", "date": "2025-02-14", "type": "anniversary"})
    assert response.status_code == 200
    event = response.json()["event"]
    assert event["date"] == "2025-02-14"
    assert event["type"] == "anniversary"

    bob.post("/events", json={"title": "Dinner", "date": "2025-01-10"})

    events = alice.get("/events").json()["events"]
    assert [e["title"] for e in events] == ["Dinner", "Anniversary"]
    assert events[0]["type"] == "date"


def test_event_syncs_for_each_member(couple_clients, monkeypatch):
    alice, _, _ = couple_clients
    calls = []

    async def fake_add(db, user_id, title, day, description=None):
        calls.append((user_id, title, day.isoformat()))
        return {"id": "evt"}

    monkeypatch.setattr(calendar_service, "add_event_to_google_calendar", fake_add)

    alice.post("/events", json={"title": "Picnic", "date": "2025-05-05"})

    assert len(calls) == 2
    assert {c[1] for c in calls} == {"Picnic"}
    assert {c[2] for c in calls} == {"2025-05-05"}


def test_failed_sync_does_not_fail_event(couple_clients, db, monkeypatch):
    alice, _, _ = couple_clients
    user = db.query(User).filter(User.email == "alice@example.com").first()
    user.google_access_token = "stale"
    user.google_refresh_token = "refresh"
    db.commit()

    async def broken_refresh(refresh_token):
        raise UpstreamError("Google token endpoint HTTP error: 400")

    monkeypatch.setattr(calendar_service, "refresh_access_token", broken_refresh)

    response = alice.post("/events", json={"title": "Concert", "date": "2025-03-01"})
    assert response.status_code == 200
    assert len(alice.get("/events").json()["events"]) == 1


def test_delete_event_scoped_to_room(couple_clients, register):
    alice, bob, _ = couple_clients
    carol, _ = register("Carol", "carol@example.com", "create")
    event_id = alice.post("/events", json={"title": "Movie", "date": "2025-04-01"}).json()["event"]["id"]

    assert carol.get("/events").json()["events"] == []
    assert carol.delete(f"/events/{event_id}").status_code == 404

    assert bob.delete(f"/events/{event_id}").json() == {"success": True}
    assert alice.get("/events").json()["events"] == []


def test_events_require_couple(solo_client):
    assert solo_client.get("/events").status_code == 403
    assert solo_client.post("/events", json={"title": "x", "date": "2025-01-01"}).status_code == 403
