"""Shared test fixtures."""

from datetime import date, datetime, timezone
from itertools import count

import pytest
from httpx import ASGITransport, AsyncClient

from finance_tracker.core.storage import JsonStore, get_store
from finance_tracker.main import app
from finance_tracker.schemas.transaction import Transaction

REFERENCE_DATE = date(2026, 3, 15)

CATEGORY_NAMES = {
    "salary": "Salary",
    "housing": "Housing",
    "food": "Food & Dining",
    "shopping": "Shopping",
    "entertainment": "Entertainment",
    "utilities": "Utilities",
    "transportation": "Transportation",
    "healthcare": "Healthcare",
    "education": "Education",
}


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def make_txn():
    """Factory for stored-shape transactions dated in the reference month."""
    ids = count(1)

    def _make(type, amount, category="food", on=REFERENCE_DATE, name=None):
        return Transaction(
            id=f"t{next(ids)}",
            type=type,
            amount=amount,
            description=f"{category} {amount}",
            category=category,
            category_name=name or CATEGORY_NAMES.get(category, category),
            date=on,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def store(tmp_path) -> JsonStore:
    return JsonStore(tmp_path / "finance_tracker.json")


@pytest.fixture
async def client(store):
    """Async test client for the FastAPI app, backed by a temporary store."""
    app.dependency_overrides[get_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
