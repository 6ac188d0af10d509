"""Analytics service: loads stored data and runs the pure analytics engine
for an explicit reference date."""

from datetime import date

from finance_tracker.core.storage import JsonStore
from finance_tracker.schemas.analytics import (
    Advisory,
    CategoryTotal,
    DashboardResponse,
    HealthScore,
    MonthlyPoint,
    Summary,
    TrendResult,
)
from finance_tracker.services.advice_rules import build_context, generate_advice
from finance_tracker.services.aggregation import (
    calculate_trends,
    expenses_by_category,
    monthly_series,
    summarize,
)
from finance_tracker.services.budget_service import BudgetService
from finance_tracker.services.health_score import evaluate_health, savings_rate
from finance_tracker.services.periods import MonthKey, transactions_in_month
from finance_tracker.services.transaction_service import TransactionService


class AnalyticsService:
    def __init__(self, store: JsonStore):
        self.transactions = TransactionService(store)
        self.budgets = BudgetService(store)

    def _current_month(self, today: date):
        return transactions_in_month(self.transactions.load_all(), MonthKey.of(today))

    def summary(self, today: date) -> Summary:
        return summarize(self._current_month(today))

    def by_category(self, today: date) -> list[CategoryTotal]:
        return expenses_by_category(self._current_month(today))

    def monthly(self, today: date, months: int) -> list[MonthlyPoint]:
        return monthly_series(self.transactions.load_all(), today, months)

    def trends(self, today: date) -> TrendResult:
        return calculate_trends(self.transactions.load_all(), today)

    def health(self, today: date) -> HealthScore:
        current = self._current_month(today)
        summary = summarize(current)
        return evaluate_health(summary, expenses_by_category(current), self.budgets.get_budget())

    def advice(self, today: date) -> list[Advisory]:
        ctx = build_context(self.transactions.load_all(), self.budgets.get_budget(), today)
        return generate_advice(ctx)

    def dashboard(self, today: date) -> DashboardResponse:
        """Headline figures for the dashboard cards."""
        current = self._current_month(today)
        summary = summarize(current)
        budget = self.budgets.get_budget()

        if budget.monthly_limit > 0:
            budget_usage = min(summary.expenses / budget.monthly_limit * 100, 100)
        else:
            budget_usage = 0.0

        return DashboardResponse(
            summary=summary,
            expenses_by_category=expenses_by_category(current),
            budget_usage=budget_usage,
            is_over_budget=summary.expenses > budget.monthly_limit,
            savings_rate=round(savings_rate(summary), 1),
        )
