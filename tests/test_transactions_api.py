"""Integration tests for the transactions, categories and holdings endpoints."""


def test_create_category_returns_201(client):
    resp = client.post("/api/categories", json={"name": "  Services "})
    assert resp.status_code == 201
    assert resp.json()["name"] == "Services"


def test_duplicate_category_returns_409(client, make_category):
    make_category("Rent")
    resp = client.post("/api/categories", json={"name": "Rent"})
    assert resp.status_code == 409
    assert "already exists" in resp.json()["detail"]


def test_empty_category_name_returns_422(client):
    assert client.post("/api/categories", json={"name": "  "}).status_code == 422


def test_create_transaction_returns_recent_transaction_shape(client, make_category):
    category_id = make_category("Services")
    resp = client.post("/api/transactions", json={
        "type": "income",
        "amount": 250,
        "description": "Consulting",
        "date": "2024-03-01T00:00:00",
        "category_id": category_id,
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] is not None
    assert body["type"] == "income"
    assert body["amount"] == 250
    assert body["description"] == "Consulting"
    assert body["date"].startswith("2024-03-01")
    assert body["category"] == {"name": "Services"}


def test_create_transaction_unknown_category_returns_404(client):
    resp = client.post("/api/transactions", json={
        "type": "expense", "amount": 10, "description": "Lunch",
        "date": "2024-03-01T12:00:00", "category_id": 99999,
    })
    assert resp.status_code == 404


def test_negative_amount_returns_422(client, make_category):
    category_id = make_category()
    resp = client.post("/api/transactions", json={
        "type": "expense", "amount": -5, "description": "Refund",
        "date": "2024-03-01T12:00:00", "category_id": category_id,
    })
    assert resp.status_code == 422


def test_unknown_type_returns_422(client, make_category):
    category_id = make_category()
    resp = client.post("/api/transactions", json={
        "type": "transfer", "amount": 5, "description": "Move",
        "date": "2024-03-01T12:00:00", "category_id": category_id,
    })
    assert resp.status_code == 422


def test_list_is_most_recent_first_and_capped_by_limit(client, make_transaction):
    for day in range(1, 8):
        make_transaction("expense", day, description=f"Day {day}", date=f"2024-03-0{day}T10:00:00")

    resp = client.get("/api/transactions", params={"limit": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 5
    assert [t["description"] for t in body] == ["Day 7", "Day 6", "Day 5", "Day 4", "Day 3"]


def test_same_day_transactions_order_by_newest_insert(client, make_transaction):
    first = make_transaction(description="First", date="2024-03-01T10:00:00")
    second = make_transaction(description="Second", date="2024-03-01T10:00:00")

    body = client.get("/api/transactions", params={"limit": 5}).json()
    assert [t["id"] for t in body] == [second["id"], first["id"]]


def test_list_limit_must_be_positive(client):
    assert client.get("/api/transactions", params={"limit": 0}).status_code == 422


def test_assets_and_investments_round_trip(client):
    assert client.post("/api/assets", json={"name": "Laptop", "value": 1800}).status_code == 201
    assert client.post("/api/investments", json={
        "name": "Bonds", "amount_invested": 1000, "current_value": 1020.5,
    }).status_code == 201

    assets = client.get("/api/assets").json()
    investments = client.get("/api/investments").json()
    assert [a["name"] for a in assets] == ["Laptop"]
    assert investments[0]["current_value"] == 1020.5


def test_asset_with_blank_name_returns_422(client):
    assert client.post("/api/assets", json={"name": "", "value": 1}).status_code == 422
