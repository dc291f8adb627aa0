"""
Tests for the trip summary and settlement endpoints.
"""


def test_summary_and_settlement_two_participants(client, auth_headers, trip, add_participant, add_expense):
    a = add_participant(trip["id"], "A")
    b = add_participant(trip["id"], "B")
    add_expense(trip["id"], a["id"], 100)

    summary = client.get(f"/api/trips/{trip['id']}/summary", headers=auth_headers)
    assert summary.status_code == 200
    data = summary.json()
    assert data["tripId"] == trip["id"]
    assert data["tripName"] == "Asturias"
    assert data["currency"] == "EUR"
    assert data["totalAmount"] == 100
    assert data["participants"] == [
        {"id": a["id"], "name": "A", "totalPaid": 100, "balance": 50},
        {"id": b["id"], "name": "B", "totalPaid": 0, "balance": -50},
    ]

    settlement = client.get(f"/api/trips/{trip['id']}/settlement", headers=auth_headers)
    assert settlement.status_code == 200
    assert settlement.json()["payments"] == [
        {
            "payerId": b["id"],
            "payerName": "B",
            "receiverId": a["id"],
            "receiverName": "A",
            "amount": 50,
        }
    ]


def test_summary_three_participants_balances_sum_to_zero(client, auth_headers, trip, add_participant, add_expense):
    juan = add_participant(trip["id"], "Juan")
    maria = add_participant(trip["id"], "Maria")
    carlos = add_participant(trip["id"], "Carlos")
    add_expense(trip["id"], juan["id"], "75.00")
    add_expense(trip["id"], maria["id"], "90.00")
    add_expense(trip["id"], carlos["id"], "125.00")

    data = client.get(f"/api/trips/{trip['id']}/summary", headers=auth_headers).json()
    balances = {p["name"]: p["balance"] for p in data["participants"]}

    assert data["totalAmount"] == 290
    assert balances == {"Juan": -21.67, "Maria": -6.67, "Carlos": 28.34}

    payments = client.get(f"/api/trips/{trip['id']}/settlement", headers=auth_headers).json()["payments"]
    assert len(payments) == 2
    assert all(p["receiverId"] == carlos["id"] for p in payments)
    assert round(sum(p["amount"] for p in payments), 2) == 28.34


def test_empty_trip(client, auth_headers, trip, add_participant):
    add_participant(trip["id"], "A")
    add_participant(trip["id"], "B")

    summary = client.get(f"/api/trips/{trip['id']}/summary", headers=auth_headers).json()
    assert summary["totalAmount"] == 0
    assert all(p["balance"] == 0 for p in summary["participants"])

    settlement = client.get(f"/api/trips/{trip['id']}/settlement", headers=auth_headers).json()
    assert settlement["payments"] == []


def test_settlement_of_unknown_trip(client, auth_headers):
    assert client.get("/api/trips/999/settlement", headers=auth_headers).status_code == 404
    assert client.get("/api/trips/999/summary", headers=auth_headers).status_code == 404


def test_settlement_requires_authentication(client, trip):
    assert client.get(f"/api/trips/{trip['id']}/settlement").status_code == 401
