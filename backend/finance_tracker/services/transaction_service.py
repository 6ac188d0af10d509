"""Transaction management service."""

import uuid
from datetime import datetime, timezone
from typing import Literal

import structlog

from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.core.storage import STORAGE_KEYS, JsonStore
from finance_tracker.schemas.transaction import Transaction, TransactionCreate
from finance_tracker.services.category_service import CategoryService

logger = structlog.get_logger()

FALLBACK_ICON = "📦"
FALLBACK_COLOR = "#6b7280"


class TransactionService:
    def __init__(self, store: JsonStore):
        self.store = store

    def load_all(self) -> list[Transaction]:
        """All stored transactions, newest entry first (stored order).

        Records that no longer validate are skipped rather than failing the
        whole list.
        """
        raw = self.store.get(STORAGE_KEYS["transactions"], [])
        if not isinstance(raw, list):
            logger.warning("stored_transactions_invalid", kind=type(raw).__name__)
            return []
        transactions = []
        for record in raw:
            try:
                transactions.append(Transaction.model_validate(record))
            except ValueError as e:
                logger.warning("stored_transaction_skipped", error=str(e))
        return transactions

    def list_transactions(
        self,
        search: str | None = None,
        kind: Literal["all", "income", "expense"] = "all",
        sort_by: str = "date",
    ) -> list[Transaction]:
        """Filter by text and type, then sort newest or largest first."""
        transactions = self.load_all()

        if search:
            needle = search.lower()
            transactions = [
                t
                for t in transactions
                if needle in t.description.lower() or needle in t.category_name.lower()
            ]
        if kind != "all":
            transactions = [t for t in transactions if t.type == kind]

        if sort_by == "date":
            transactions.sort(key=lambda t: t.date, reverse=True)
        elif sort_by == "amount":
            transactions.sort(key=lambda t: t.amount, reverse=True)
        return transactions

    def get_transaction(self, transaction_id: str) -> Transaction:
        for txn in self.load_all():
            if txn.id == transaction_id:
                return txn
        raise NotFoundError("Transaction", transaction_id)

    def create_transaction(
        self, data: TransactionCreate, now: datetime | None = None
    ) -> Transaction:
        """Record a transaction, snapshotting the category's display fields."""
        category = CategoryService(self.store).find(data.type, data.category)
        if category is None:
            logger.warning("unknown_category", type=data.type, category=data.category)

        txn = Transaction(
            id=uuid.uuid4().hex,
            type=data.type,
            amount=data.amount,
            description=data.description,
            category=data.category,
            category_name=category.name if category else data.category,
            category_icon=category.icon if category else FALLBACK_ICON,
            category_color=category.color if category else FALLBACK_COLOR,
            date=data.date,
            created_at=now or datetime.now(timezone.utc),
        )

        self.store.update(
            STORAGE_KEYS["transactions"],
            lambda raw: [txn.model_dump(mode="json"), *(raw if isinstance(raw, list) else [])],
            [],
        )
        logger.info(
            "transaction_created",
            id=txn.id,
            type=txn.type,
            amount=txn.amount,
            category=txn.category,
        )
        return txn

    def delete_transaction(self, transaction_id: str) -> None:
        found = False

        def _remove(raw):
            nonlocal found
            records = raw if isinstance(raw, list) else []
            kept = [r for r in records if not (isinstance(r, dict) and r.get("id") == transaction_id)]
            found = len(kept) != len(records)
            return kept

        self.store.update(STORAGE_KEYS["transactions"], _remove, [])
        if not found:
            raise NotFoundError("Transaction", transaction_id)
        logger.info("transaction_deleted", id=transaction_id)
