"""Analytics schemas."""

from typing import Literal

from pydantic import BaseModel

FactorStatus = Literal["excellent", "good", "needs-improvement"]
AdvisoryType = Literal["success", "warning", "danger", "info", "health-score"]


class Summary(BaseModel):
    income: float
    expenses: float
    balance: float
    transaction_count: int


class CategoryTotal(BaseModel):
    category: str
    name: str
    value: float


class MonthlyPoint(BaseModel):
    period: str  # "2026-01", "2026-02", etc.
    month: str  # short label for charts: "Jan", "Feb", ...
    income: float
    expenses: float
    savings: float


class TrendResult(BaseModel):
    income_change: float
    expense_change: float
    transaction_count_change: float
    current_income: float
    current_expenses: float
    last_income: float
    last_expenses: float


class HealthFactor(BaseModel):
    score: int
    label: str
    status: FactorStatus


class HealthScore(BaseModel):
    score: int
    factors: list[HealthFactor]


class Advisory(BaseModel):
    type: AdvisoryType
    title: str
    message: str
    action: str | None = None
    action_link: str | None = None
    score: int | None = None
    factors: list[HealthFactor] | None = None
    icon: str | None = None


class DashboardResponse(BaseModel):
    summary: Summary
    expenses_by_category: list[CategoryTotal]
    budget_usage: float
    is_over_budget: bool
    savings_rate: float
