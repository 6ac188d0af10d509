"""Transaction API routes."""

from fastapi import APIRouter, Depends, Query

from finance_tracker.api.deps import get_store
from finance_tracker.core.storage import JsonStore
from finance_tracker.schemas.transaction import Transaction, TransactionCreate
from finance_tracker.services.transaction_service import TransactionService

router = APIRouter()


@router.get("", response_model=list[Transaction])
def list_transactions(
    search: str | None = None,
    kind: str = Query("all", alias="type", pattern="^(all|income|expense)$"),
    sort_by: str = Query("date", pattern="^(date|amount)$"),
    store: JsonStore = Depends(get_store),
):
    """List transactions, newest first by default.

    ``search`` matches description or category name, case-insensitively.
    """
    service = TransactionService(store)
    return service.list_transactions(search=search, kind=kind, sort_by=sort_by)


@router.post("", response_model=Transaction, status_code=201)
def create_transaction(
    data: TransactionCreate,
    store: JsonStore = Depends(get_store),
):
    """Record a transaction; the category's name, icon and color are snapshotted."""
    service = TransactionService(store)
    return service.create_transaction(data)


@router.get("/{transaction_id}", response_model=Transaction)
def get_transaction(
    transaction_id: str,
    store: JsonStore = Depends(get_store),
):
    service = TransactionService(store)
    return service.get_transaction(transaction_id)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    store: JsonStore = Depends(get_store),
):
    service = TransactionService(store)
    service.delete_transaction(transaction_id)
