"""Rider routes end to end through the FastAPI app."""

NEW_RIDER = {
    "firstName": "Sam",
    "lastName": "Ortiz",
    "phoneNumber": "(607) 555-0111",
    "email": "sam@cornell.edu",
    "accessibility": "Crutches",
    "joinDate": "2024-08-20",
    "address": "36 Colonial Ln",
}


def test_admin_creates_rider(client, headers):
    response = client.post("/api/riders", json=NEW_RIDER, headers=headers["admin"])

    assert response.status_code == 200
    rider = response.json()["data"]
    assert rider["id"]
    assert rider["phoneNumber"] == "6075550111"
    assert rider["address"] == "36 Colonial Ln, Ithaca, NY 14850"
    assert rider["active"] is True
    assert rider["favoriteLocations"] == []

    fetched = client.get(f"/api/riders/{rider['id']}", headers=headers["admin"])
    assert fetched.status_code == 200
    assert fetched.json()["data"] == rider


def test_dispatcher_cannot_create_rider(client, headers):
    before = client.get("/api/riders", headers=headers["dispatcher"]).json()["data"]

    response = client.post("/api/riders", json=NEW_RIDER, headers=headers["dispatcher"])
    assert response.status_code == 403
    assert set(response.json()) == {"err"}

    after = client.get("/api/riders", headers=headers["dispatcher"]).json()["data"]
    assert len(after) == len(before)


def test_create_rider_validation(client, headers):
    response = client.post("/api/riders", json={**NEW_RIDER, "phoneNumber": "12"}, headers=headers["admin"])
    assert response.status_code == 422
    assert response.json()["err"].startswith("phoneNumber")


def test_list_riders(client, headers):
    response = client.get("/api/riders", headers=headers["dispatcher"])
    assert response.status_code == 200
    assert {r["id"] for r in response.json()["data"]} == {"rider-1", "rider-2"}

    assert client.get("/api/riders", headers=headers["rider"]).status_code == 403
    assert client.get("/api/riders", headers=headers["driver"]).status_code == 403


def test_rider_reads_only_self(client, headers):
    assert client.get("/api/riders/rider-1", headers=headers["rider"]).json()["data"]["email"] == "riley@cornell.edu"
    assert client.get("/api/riders/rider-2", headers=headers["rider"]).status_code == 403


def test_driver_reads_rider(client, headers):
    response = client.get("/api/riders/rider-1", headers=headers["driver"])
    assert response.status_code == 200


def test_unknown_rider(client, headers):
    response = client.get("/api/riders/rider-404", headers=headers["admin"])
    assert response.status_code == 404
    assert response.json() == {"err": "Rider not found"}


def test_profile_views_have_no_envelope(client, headers):
    profile = client.get("/api/riders/rider-1/profile", headers=headers["rider"]).json()
    assert profile == {
        "email": "riley@cornell.edu",
        "phoneNumber": "6075550103",
        "firstName": "Riley",
        "lastName": "Chen",
        "pronouns": "they/them",
        "joinDate": "2023-01-01",
        "endDate": None,
    }

    organization = client.get("/api/riders/rider-1/organization", headers=headers["driver"]).json()
    assert organization == {"organization": "RedRunner", "description": "Needs the ramp lowered"}

    accessibility = client.get("/api/riders/rider-1/accessibility", headers=headers["admin"]).json()
    assert accessibility == {"accessibility": "Wheelchair", "description": "Needs the ramp lowered"}


def test_favorites_flow(client, headers):
    response = client.post("/api/riders/rider-1/favorites", json={"id": "loc-north"}, headers=headers["rider"])
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Balch Hall"

    # adding twice keeps a single entry
    client.post("/api/riders/rider-1/favorites", json={"id": "loc-north"}, headers=headers["rider"])
    client.post("/api/riders/rider-1/favorites", json={"id": "loc-central"}, headers=headers["admin"])

    favorites = client.get("/api/riders/rider-1/favorites", headers=headers["rider"]).json()["data"]
    assert [loc["id"] for loc in favorites] == ["loc-north", "loc-central"]

    response = client.delete("/api/riders/rider-1/favorites/loc-north", headers=headers["rider"])
    assert response.status_code == 200
    favorites = client.get("/api/riders/rider-1/favorites", headers=headers["rider"]).json()["data"]
    assert [loc["id"] for loc in favorites] == ["loc-central"]


def test_favorite_unknown_location(client, headers):
    response = client.post("/api/riders/rider-1/favorites", json={"id": "loc-404"}, headers=headers["rider"])
    assert response.status_code == 404


def test_favorites_restricted(client, headers):
    body = {"id": "loc-north"}
    assert client.post("/api/riders/rider-2/favorites", json=body, headers=headers["rider"]).status_code == 403
    assert client.post("/api/riders/rider-1/favorites", json=body, headers=headers["driver"]).status_code == 403
    assert client.post("/api/riders/rider-1/favorites", json=body, headers=headers["dispatcher"]).status_code == 403


def test_rider_updates_self(client, headers):
    before = client.get("/api/riders/rider-1", headers=headers["rider"]).json()["data"]

    response = client.put("/api/riders/rider-1", json={"firstName": "NewName"}, headers=headers["rider"])
    assert response.status_code == 200
    assert response.json()["data"] == {**before, "firstName": "NewName"}

    after = client.get("/api/riders/rider-1", headers=headers["rider"]).json()["data"]
    assert after == {**before, "firstName": "NewName"}

    assert client.put("/api/riders/rider-2", json={"pronouns": "x"}, headers=headers["rider"]).status_code == 403
    assert client.put("/api/riders/rider-1", json={"pronouns": "x"}, headers=headers["driver"]).status_code == 403


def test_update_rejects_null_required_field(client, headers):
    response = client.put("/api/riders/rider-1", json={"firstName": None}, headers=headers["admin"])
    assert response.status_code == 422


def test_update_with_empty_body(client, headers):
    response = client.put("/api/riders/rider-1", json={}, headers=headers["admin"])
    assert response.status_code == 422
    assert response.json() == {"err": "No fields to update"}


def test_update_unknown_rider(client, headers):
    response = client.put("/api/riders/rider-404", json={"pronouns": "x"}, headers=headers["admin"])
    assert response.status_code == 404


def test_rider_rides(client, headers):
    for hour in (15, 9):
        client.post(
            "/api/rides",
            json={
                "startTime": f"2026-10-21T{hour:02d}:00:00-04:00",
                "endTime": f"2026-10-21T{hour:02d}:30:00-04:00",
                "rider": "rider-1",
                "startLocation": "loc-north",
                "endLocation": "loc-central",
            },
            headers=headers["rider"],
        )

    response = client.get("/api/riders/rider-1/rides", headers=headers["rider"])
    assert response.status_code == 200
    starts = [ride["startTime"] for ride in response.json()["data"]]
    assert starts == ["2026-10-21T09:00:00-04:00", "2026-10-21T15:00:00-04:00"]

    assert client.get("/api/riders/rider-2/rides", headers=headers["rider"]).status_code == 403
    assert client.get("/api/riders/rider-1/rides", headers=headers["driver"]).status_code == 403
    assert client.get("/api/riders/rider-1/rides", headers=headers["dispatcher"]).status_code == 200


def test_usage(client, headers):
    response = client.get("/api/riders/usage", headers=headers["admin"])
    assert response.status_code == 200
    assert response.json() == {
        "rider-1": {"noShows": 0, "totalRides": 0},
        "rider-2": {"noShows": 0, "totalRides": 0},
    }
    assert client.get("/api/riders/usage", headers=headers["dispatcher"]).status_code == 403


def test_delete_rider(client, headers):
    assert client.delete("/api/riders/rider-2", headers=headers["rider"]).status_code == 403

    response = client.delete("/api/riders/rider-2", headers=headers["admin"])
    assert response.status_code == 200
    assert response.json() == {"id": "rider-2"}
    assert client.get("/api/riders/rider-2", headers=headers["admin"]).status_code == 404
    assert client.delete("/api/riders/rider-2", headers=headers["admin"]).status_code == 404


def test_deleted_rider_token_is_rejected(client, headers):
    client.delete("/api/riders/rider-2", headers=headers["admin"])
    response = client.get("/api/riders/rider-2", headers=headers["other_rider"])
    assert response.status_code == 401


def test_inactive_rider_is_locked_out(client, headers):
    client.put("/api/riders/rider-1", json={"active": False}, headers=headers["admin"])
    response = client.get("/api/riders/rider-1", headers=headers["rider"])
    assert response.status_code == 403


def test_create_then_get_round_trip(client, headers):
    body = {
        "firstName": "Test",
        "lastName": "Testing2",
        "phoneNumber": "6075550198",
        "email": "test-email2@test.com",
        "pronouns": "he/him",
        "accessibility": "Wheelchair",
        "description": "",
        "joinDate": "2024-01-15",
        "address": "200 Triphammer Rd, Ithaca, NY 14850",
        "favoriteLocations": [],
        "photoLink": "",
        "active": True,
    }

    created = client.post("/api/riders", json=body, headers=headers["admin"]).json()["data"]
    rider_id = created.pop("id")
    assert created == body

    fetched = client.get(f"/api/riders/{rider_id}", headers=headers["admin"]).json()["data"]
    assert fetched.pop("id") == rider_id
    assert fetched == body
