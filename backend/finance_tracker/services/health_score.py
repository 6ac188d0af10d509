"""Financial health score (0-100) from four independent factors.

Each factor lands in one of three tiers; tier points are summed with no
interaction between factors.

    Savings Rate          40 / 25 / 10
    Budget Adherence      30 / 20 / 5
    Expense Diversity     20 / 12 / 5
    Tracking Consistency  10 / 6  / 2
"""

from finance_tracker.schemas.analytics import CategoryTotal, HealthFactor, HealthScore, Summary
from finance_tracker.schemas.budget import Budget


def savings_rate(summary: Summary) -> float:
    """Balance as a percent of income; 0 when there is no income."""
    if summary.income <= 0:
        return 0.0
    return summary.balance / summary.income * 100


def _savings_factor(summary: Summary) -> HealthFactor:
    rate = savings_rate(summary)
    if rate >= 20:
        return HealthFactor(score=40, label="Savings Rate", status="excellent")
    if rate >= 10:
        return HealthFactor(score=25, label="Savings Rate", status="good")
    return HealthFactor(score=10, label="Savings Rate", status="needs-improvement")


def _budget_factor(summary: Summary, budget: Budget | None) -> HealthFactor:
    if budget is not None and summary.expenses <= budget.monthly_limit * 0.8:
        return HealthFactor(score=30, label="Budget Adherence", status="excellent")
    if budget is not None and summary.expenses <= budget.monthly_limit:
        return HealthFactor(score=20, label="Budget Adherence", status="good")
    return HealthFactor(score=5, label="Budget Adherence", status="needs-improvement")


def _diversity_factor(categories: list[CategoryTotal]) -> HealthFactor:
    distinct = len({c.category for c in categories})
    if distinct >= 5:
        return HealthFactor(score=20, label="Expense Diversity", status="excellent")
    if distinct >= 3:
        return HealthFactor(score=12, label="Expense Diversity", status="good")
    return HealthFactor(score=5, label="Expense Diversity", status="needs-improvement")


def _consistency_factor(summary: Summary) -> HealthFactor:
    if summary.transaction_count >= 10:
        return HealthFactor(score=10, label="Tracking Consistency", status="excellent")
    if summary.transaction_count >= 5:
        return HealthFactor(score=6, label="Tracking Consistency", status="good")
    return HealthFactor(score=2, label="Tracking Consistency", status="needs-improvement")


def evaluate_health(
    summary: Summary,
    categories: list[CategoryTotal],
    budget: Budget | None,
) -> HealthScore:
    """Score the month. A missing budget scores as not adhered to."""
    factors = [
        _savings_factor(summary),
        _budget_factor(summary, budget),
        _diversity_factor(categories),
        _consistency_factor(summary),
    ]
    return HealthScore(score=sum(f.score for f in factors), factors=factors)
