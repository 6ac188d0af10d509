"""Category catalog service."""

import structlog

from finance_tracker.core.storage import STORAGE_KEYS, JsonStore
from finance_tracker.schemas.category import Category, CategoryCatalog
from finance_tracker.schemas.transaction import TransactionType

logger = structlog.get_logger()

DEFAULT_CATEGORIES = CategoryCatalog(
    income=[
        Category(id="salary", name="Salary", icon="💼", color="#10b981"),
        Category(id="freelance", name="Freelance", icon="💻", color="#0ea5e9"),
        Category(id="investments", name="Investments", icon="📈", color="#8b5cf6"),
        Category(id="business", name="Business", icon="🏢", color="#f59e0b"),
        Category(id="other-income", name="Other", icon="💰", color="#6b7280"),
    ],
    expense=[
        Category(id="housing", name="Housing", icon="🏠", color="#ef4444"),
        Category(id="transportation", name="Transportation", icon="🚗", color="#f59e0b"),
        Category(id="food", name="Food & Dining", icon="🍔", color="#10b981"),
        Category(id="utilities", name="Utilities", icon="💡", color="#0ea5e9"),
        Category(id="healthcare", name="Healthcare", icon="🏥", color="#ec4899"),
        Category(id="entertainment", name="Entertainment", icon="🎬", color="#8b5cf6"),
        Category(id="shopping", name="Shopping", icon="🛍️", color="#f97316"),
        Category(id="education", name="Education", icon="📚", color="#06b6d4"),
        Category(id="savings", name="Savings", icon="🏦", color="#14b8a6"),
        Category(id="other-expense", name="Other", icon="📦", color="#6b7280"),
    ],
)


class CategoryService:
    def __init__(self, store: JsonStore):
        self.store = store

    def get_catalog(self) -> CategoryCatalog:
        """Stored catalog, or the defaults when none was saved or it is unusable."""
        raw = self.store.get(STORAGE_KEYS["categories"])
        if raw is None:
            return DEFAULT_CATEGORIES
        try:
            return CategoryCatalog.model_validate(raw)
        except ValueError as e:
            logger.warning("stored_categories_invalid", error=str(e))
            return DEFAULT_CATEGORIES

    def find(self, type: TransactionType, category_id: str) -> Category | None:
        catalog = self.get_catalog()
        for category in getattr(catalog, type):
            if category.id == category_id:
                return category
        return None

    def replace_catalog(self, catalog: CategoryCatalog) -> CategoryCatalog:
        """Persist a new catalog. Existing transactions keep their snapshots."""
        self.store.set(STORAGE_KEYS["categories"], catalog.model_dump(mode="json"))
        logger.info(
            "categories_updated",
            income=len(catalog.income),
            expense=len(catalog.expense),
        )
        return catalog
