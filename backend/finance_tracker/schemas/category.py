"""Category schemas."""

from pydantic import BaseModel, model_validator


class Category(BaseModel):
    id: str
    name: str
    icon: str
    color: str


class CategoryCatalog(BaseModel):
    """Income and expense categories; ids are unique within each list only."""

    income: list[Category]
    expense: list[Category]

    @model_validator(mode="after")
    def _unique_ids_per_type(self) -> "CategoryCatalog":
        for kind in ("income", "expense"):
            ids = [c.id for c in getattr(self, kind)]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"duplicate {kind} category ids: {', '.join(duplicates)}")
        return self
