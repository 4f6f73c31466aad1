"""
Tests for timeline moments.
"""


def test_moments_are_chronological(couple_clients):
    alice, bob, _ = couple_clients
    alice.post("/timeline", json={"title": "Moved in", "date": "2023-05-01T00:00:00", "iconType": "home"})
    response = bob.post("/timeline", json={"title": "First met", "date": "2021-09-12T00:00:00"})
    assert response.status_code == 201
    assert response.json()["iconType"] == "heart"

    moments = alice.get("/timeline").json()
    assert [m["title"] for m in moments] == ["First met", "Moved in"]


def test_update_moment(couple_clients):
    alice, bob, _ = couple_clients
    moment = alice.post(
        "/timeline",
        json={"title": "Trip", "date": "2022-07-01T00:00:00", "description": "Lisbon"}
    ).json()

    response = bob.patch(f"/timeline/{moment['id']}", json={"iconType": "plane", "description": None})
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Trip"
    assert updated["iconType"] == "plane"
    assert updated["description"] is None


def test_delete_moment(couple_clients):
    alice, _, _ = couple_clients
    moment_id = alice.post("/timeline", json={"title": "x", "date": "2022-01-01T00:00:00"}).json()["id"]

    assert alice.delete(f"/timeline/{moment_id}").status_code == 200
    assert alice.get("/timeline").json() == []
    assert alice.delete(f"/timeline/{moment_id}").status_code == 404


def test_other_room_cannot_edit_moment(couple_clients, register):
    alice, _, _ = couple_clients
    carol, _ = register("Carol", "carol@example.com", "create")
    moment_id = alice.post("/timeline", json={"title": "ours", "date": "2022-01-01T00:00:00"}).json()["id"]

    assert carol.get("/timeline").json() == []
    assert carol.patch(f"/timeline/{moment_id}", json={"title": "theirs"}).status_code == 404


def test_timeline_requires_couple(solo_client):
    assert solo_client.get("/timeline").status_code == 403
    response = solo_client.post("/timeline", json={"title": "x", "date": "2022-01-01T00:00:00"})
    assert response.status_code == 403


def test_offset_moment_date_stored_as_utc(couple_clients):
    alice, _, _ = couple_clients

    response = alice.post("/timeline", json={"title": "Engaged", "date": "2024-01-01T02:00:00+09:00"})
    assert response.json()["date"].startswith("2023-12-31T17:00:00")
