"""Budget API routes."""

from fastapi import APIRouter, Depends

from finance_tracker.api.deps import get_store
from finance_tracker.core.storage import JsonStore
from finance_tracker.schemas.budget import Budget
from finance_tracker.services.budget_service import BudgetService

router = APIRouter()


@router.get("", response_model=Budget)
def get_budget(store: JsonStore = Depends(get_store)):
    service = BudgetService(store)
    return service.get_budget()


@router.put("", response_model=Budget)
def update_budget(
    data: Budget,
    store: JsonStore = Depends(get_store),
):
    """Save the monthly limit and alert threshold."""
    service = BudgetService(store)
    return service.update_budget(data)
