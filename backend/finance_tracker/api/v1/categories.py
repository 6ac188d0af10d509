"""Category API routes."""

from fastapi import APIRouter, Depends

from finance_tracker.api.deps import get_store
from finance_tracker.core.storage import JsonStore
from finance_tracker.schemas.category import CategoryCatalog
from finance_tracker.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=CategoryCatalog)
def get_categories(store: JsonStore = Depends(get_store)):
    """Income and expense categories (defaults until replaced)."""
    service = CategoryService(store)
    return service.get_catalog()


@router.put("", response_model=CategoryCatalog)
def replace_categories(
    data: CategoryCatalog,
    store: JsonStore = Depends(get_store),
):
    """Replace the whole catalog. Existing transactions keep their snapshots."""
    service = CategoryService(store)
    return service.replace_catalog(data)
