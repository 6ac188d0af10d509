"""Transaction schemas for request/response validation."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

TransactionType = Literal["income", "expense"]


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: float = Field(gt=0)
    description: str
    category: str
    date: date

    @field_validator("description", "category")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class Transaction(BaseModel):
    """A recorded transaction.

    The ``category_*`` fields are a snapshot of the catalog entry taken at
    creation time; renaming or removing the category later leaves them
    untouched.
    """

    id: str
    type: TransactionType
    amount: float = Field(ge=0)
    description: str
    category: str
    category_name: str
    category_icon: str = "📦"
    category_color: str = "#6b7280"
    date: date
    created_at: datetime

    model_config = {"frozen": True}
