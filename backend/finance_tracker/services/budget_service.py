"""Budget settings service."""

import structlog

from finance_tracker.config import settings
from finance_tracker.core.storage import STORAGE_KEYS, JsonStore
from finance_tracker.schemas.budget import Budget

logger = structlog.get_logger()


def default_budget() -> Budget:
    return Budget(
        monthly_limit=settings.default_monthly_limit,
        alert_threshold=settings.default_alert_threshold,
    )


class BudgetService:
    def __init__(self, store: JsonStore):
        self.store = store

    def get_budget(self) -> Budget:
        raw = self.store.get(STORAGE_KEYS["budget"])
        if raw is None:
            return default_budget()
        try:
            return Budget.model_validate(raw)
        except ValueError as e:
            logger.warning("stored_budget_invalid", error=str(e))
            return default_budget()

    def update_budget(self, budget: Budget) -> Budget:
        self.store.set(STORAGE_KEYS["budget"], budget.model_dump(mode="json"))
        logger.info(
            "budget_updated",
            monthly_limit=budget.monthly_limit,
            alert_threshold=budget.alert_threshold,
        )
        return budget
