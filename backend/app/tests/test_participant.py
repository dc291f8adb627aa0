"""
Tests for participant endpoints.
"""


def test_add_participant(client, auth_headers, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/participants",
        json={"name": "  Juan  "},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Juan"
    assert data["tripId"] == trip["id"]


def test_add_participant_rejects_empty_name(client, auth_headers, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/participants",
        json={"name": "   "},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Participant name is required"


def test_add_participant_to_unknown_trip(client, auth_headers):
    response = client.post(
        "/api/trips/424242/participants",
        json={"name": "Juan"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_list_participants(client, auth_headers, trip, add_participant):
    add_participant(trip["id"], "Juan")
    add_participant(trip["id"], "Maria")

    response = client.get(f"/api/trips/{trip['id']}/participants", headers=auth_headers)
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Juan", "Maria"]


def test_update_participant(client, auth_headers, trip, add_participant):
    juan = add_participant(trip["id"], "Juan")

    response = client.put(
        f"/api/trips/{trip['id']}/participants/{juan['id']}",
        json={"name": "Juan Carlos", "email": "jc@example.com"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Juan Carlos"
    assert response.json()["email"] == "jc@example.com"


def test_update_participant_of_other_trip(client, auth_headers, trip, add_participant):
    other_trip = client.post(
        "/api/trips",
        json={
            "name": "Other",
            "destination": "Leon",
            "startDate": "2025-07-01",
            "endDate": "2025-07-02",
        },
        headers=auth_headers,
    ).json()
    stranger = add_participant(other_trip["id"], "Stranger")

    response = client.put(
        f"/api/trips/{trip['id']}/participants/{stranger['id']}",
        json={"name": "Renamed"},
        headers=auth_headers,
    )
    assert response.status_code == 400

    response = client.put(
        f"/api/trips/{trip['id']}/participants/9999",
        json={"name": "Renamed"},
        headers=auth_headers,
    )
    assert response.status_code == 404
