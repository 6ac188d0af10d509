"""Transaction API tests."""

import pytest

from finance_tracker.services.transaction_service import TransactionService


def _payload(**overrides):
    data = {
        "type": "expense",
        "amount": 42.5,
        "description": "Groceries",
        "category": "food",
        "date": "2026-03-02",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_create_transaction_snapshots_category(client):
    response = await client.post("/api/v1/transactions", json=_payload(description="  Groceries  "))
    assert response.status_code == 201
    txn = response.json()

    assert txn["id"]
    assert txn["created_at"]
    assert txn["description"] == "Groceries"
    assert txn["category_name"] == "Food & Dining"
    assert txn["category_icon"] == "🍔"
    assert txn["category_color"] == "#10b981"


@pytest.mark.asyncio
async def test_unknown_category_falls_back_to_id(client):
    response = await client.post("/api/v1/transactions", json=_payload(category="pets"))
    assert response.status_code == 201
    txn = response.json()
    assert txn["category_name"] == "pets"
    assert txn["category_icon"] == "📦"
    assert txn["category_color"] == "#6b7280"


@pytest.mark.asyncio
async def test_category_lookup_is_per_type(client):
    # "salary" exists only in the income namespace
    response = await client.post(
        "/api/v1/transactions", json=_payload(type="expense", category="salary")
    )
    assert response.json()["category_name"] == "salary"

    response = await client.post(
        "/api/v1/transactions", json=_payload(type="income", category="salary")
    )
    assert response.json()["category_name"] == "Salary"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": 0},
        {"amount": -5},
        {"description": "   "},
        {"type": "transfer"},
        {"category": ""},
        {"date": "not-a-date"},
    ],
)
async def test_create_transaction_rejects_invalid_input(client, overrides):
    response = await client.post("/api/v1/transactions", json=_payload(**overrides))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_ids_are_unique(client):
    ids = set()
    for _ in range(5):
        response = await client.post("/api/v1/transactions", json=_payload())
        ids.add(response.json()["id"])
    assert len(ids) == 5


@pytest.mark.asyncio
async def test_list_filters_and_sorts(client):
    await client.post("/api/v1/transactions", json=_payload(amount=10, date="2026-03-01"))
    await client.post(
        "/api/v1/transactions",
        json=_payload(type="income", amount=3000, description="March pay", category="salary", date="2026-03-05"),
    )
    await client.post(
        "/api/v1/transactions",
        json=_payload(amount=90, description="Cinema", category="entertainment", date="2026-02-20"),
    )

    response = await client.get("/api/v1/transactions")
    assert [t["date"] for t in response.json()] == ["2026-03-05", "2026-03-01", "2026-02-20"]

    response = await client.get("/api/v1/transactions", params={"sort_by": "amount"})
    assert [t["amount"] for t in response.json()] == [3000, 90, 10]

    response = await client.get("/api/v1/transactions", params={"type": "expense"})
    assert {t["type"] for t in response.json()} == {"expense"}
    assert len(response.json()) == 2

    response = await client.get("/api/v1/transactions", params={"search": "ENTERTAIN"})
    assert [t["description"] for t in response.json()] == ["Cinema"]

    response = await client.get("/api/v1/transactions", params={"sort_by": "name"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_and_delete_transaction(client):
    created = (await client.post("/api/v1/transactions", json=_payload())).json()

    response = await client.get(f"/api/v1/transactions/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    response = await client.delete(f"/api/v1/transactions/{created['id']}")
    assert response.status_code == 204

    response = await client.get(f"/api/v1/transactions/{created['id']}")
    assert response.status_code == 404
    response = await client.delete(f"/api/v1/transactions/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_snapshot_survives_category_rename(client):
    created = (await client.post("/api/v1/transactions", json=_payload())).json()

    catalog = (await client.get("/api/v1/categories")).json()
    for category in catalog["expense"]:
        if category["id"] == "food":
            category["name"] = "Restaurants"
    response = await client.put("/api/v1/categories", json=catalog)
    assert response.status_code == 200

    stored = (await client.get(f"/api/v1/transactions/{created['id']}")).json()
    assert stored["category_name"] == "Food & Dining"

    newer = (await client.post("/api/v1/transactions", json=_payload())).json()
    assert newer["category_name"] == "Restaurants"


@pytest.mark.asyncio
async def test_missing_transaction_detail_names_the_id(client):
    response = await client.get("/api/v1/transactions/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Transaction 'nope' not found"


@pytest.mark.asyncio
async def test_list_by_kind_through_service(client, store):
    await client.post("/api/v1/transactions", json=_payload())
    await client.post("/api/v1/transactions", json=_payload(type="income", category="salary"))

    service = TransactionService(store)
    assert [t.type for t in service.list_transactions(kind="income")] == ["income"]
    assert len(service.list_transactions()) == 2
