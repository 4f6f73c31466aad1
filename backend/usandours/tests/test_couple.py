"""
Tests for couple (room) endpoints.
"""
from usandours.core.security import verify_session_token
from usandours.services import calendar_service


def test_get_couple_is_stable(couple_clients):
    alice, bob, code = couple_clients

    first = alice.get("/couple").json()
    second = bob.get("/couple").json()

    assert first == second
    assert first["secretCode"] == code
    assert first["partner2"]["name"] == "Bob"
    assert first["nextMeetingDate"] is None


def test_half_full_room(register):
    alice, _ = register("Alice", "alice@example.com", "create")

    couple = alice.get("/couple").json()
    assert couple["partner1"]["name"] == "Alice"
    assert couple["partner2"] is None


def test_set_next_meeting_adds_event(couple_clients, monkeypatch):
    alice, bob, _ = couple_clients
    synced = []

    async def fake_sync(db, couple, title, day, description=None):
        synced.append((title, day.isoformat()))
        return 0

    monkeypatch.setattr(calendar_service, "sync_event_for_couple", fake_sync)

    response = alice.patch("/couple", json={"nextMeetingDate": "2025-06-20T19:30:00Z"})
    assert response.status_code == 200
    assert response.json()["couple"]["nextMeetingDate"].startswith("2025-06-20T19:30:00")

    events = bob.get("/events").json()["events"]
    assert [(e["title"], e["date"]) for e in events] == [("Next Date ❤️", "2025-06-20")]
    assert synced == [("Next Date: Us & Ours", "2025-06-20")]


def test_clear_next_meeting(couple_clients):
    alice, _, _ = couple_clients
    alice.patch("/couple", json={"nextMeetingDate": "2025-06-20T19:30:00"})

    response = alice.patch("/couple", json={"nextMeetingDate": None})
    assert response.json()["couple"]["nextMeetingDate"] is None
    assert len(alice.get("/events").json()["events"]) == 1


def test_unpaired_user_has_no_couple(solo_client):
    response = solo_client.get("/couple")
    assert response.status_code == 404


def test_existing_user_creates_room(solo_client):
    response = solo_client.post("/couple")
    assert response.status_code == 201
    data = response.json()
    assert verify_session_token(data["access_token"]).couple_id == data["coupleId"]

    # the refreshed cookie carries the new room
    couple = solo_client.get("/couple").json()
    assert couple["secretCode"] == data["secretCode"]

    assert solo_client.post("/couple").status_code == 409


def test_existing_user_joins_room(solo_client, register):
    _, response = register("Alice", "alice@example.com", "create")
    code = response.json()["secretCode"]

    response = solo_client.post("/couple/join", json={"secretCode": code.lower()})
    assert response.status_code == 200
    assert response.json()["secretCode"] == code
    assert solo_client.get("/couple").json()["partner2"]["name"] == "Solo"


def test_join_full_room_via_api(couple_clients, solo_client):
    _, _, code = couple_clients

    response = solo_client.post("/couple/join", json={"secretCode": code})
    assert response.status_code == 403
    assert response.json() == {"error": "Room is full"}


def test_patch_without_date_keeps_meeting(couple_clients):
    alice, _, _ = couple_clients
    alice.patch("/couple", json={"nextMeetingDate": "2025-06-20T19:30:00"})

    response = alice.patch("/couple", json={})
    assert response.status_code == 200
    assert response.json()["couple"]["nextMeetingDate"].startswith("2025-06-20T19:30:00")
    assert len(alice.get("/events").json()["events"]) == 1


def test_offset_meeting_stored_as_utc(couple_clients):
    alice, _, _ = couple_clients

    response = alice.patch("/couple", json={"nextMeetingDate": "2025-06-21T01:00:00+09:00"})
    assert response.json()["couple"]["nextMeetingDate"].startswith("2025-06-20T16:00:00")
    assert alice.get("/couple").json()["nextMeetingDate"].startswith("2025-06-20T16:00:00")

    events = alice.get("/events").json()["events"]
    assert [e["date"] for e in events] == ["2025-06-20"]
