import pytest

from finance_tracker.schemas.analytics import CategoryTotal, Summary
from finance_tracker.schemas.budget import Budget
from finance_tracker.services.health_score import evaluate_health, savings_rate

BUDGET = Budget(monthly_limit=5000, alert_threshold=80)


def _summary(income, expenses, count=1):
    return Summary(
        income=income,
        expenses=expenses,
        balance=income - expenses,
        transaction_count=count,
    )


def _categories(n, value=50):
    return [CategoryTotal(category=f"c{i}", name=f"Cat {i}", value=value) for i in range(n)]


def test_best_case_scores_exactly_100():
    health = evaluate_health(_summary(10000, 2000, count=12), _categories(5), BUDGET)

    assert health.score == 100
    assert [f.label for f in health.factors] == [
        "Savings Rate",
        "Budget Adherence",
        "Expense Diversity",
        "Tracking Consistency",
    ]
    assert all(f.status == "excellent" for f in health.factors)


def test_worst_case_scores_minimum():
    health = evaluate_health(_summary(0, 6000, count=1), _categories(1), BUDGET)

    assert [f.score for f in health.factors] == [10, 5, 5, 2]
    assert health.score == 22
    assert all(f.status == "needs-improvement" for f in health.factors)


def test_zero_income_has_zero_savings_rate():
    assert savings_rate(_summary(0, 0)) == 0
    assert savings_rate(_summary(0, 100)) == 0


@pytest.mark.parametrize(
    "income, expenses, points, status",
    [
        (1000, 800, 40, "excellent"),  # exactly 20%
        (1000, 900, 25, "good"),  # exactly 10%
        (1000, 901, 10, "needs-improvement"),
        (1000, 1500, 10, "needs-improvement"),
    ],
)
def test_savings_rate_tiers(income, expenses, points, status):
    factor = evaluate_health(_summary(income, expenses), [], BUDGET).factors[0]
    assert (factor.score, factor.status) == (points, status)


@pytest.mark.parametrize(
    "expenses, points",
    [(4000, 30), (4000.01, 20), (5000, 20), (5000.01, 5)],
)
def test_budget_adherence_tiers(expenses, points):
    factor = evaluate_health(_summary(0, expenses), [], BUDGET).factors[1]
    assert factor.score == points


def test_missing_budget_scores_lowest_adherence():
    factor = evaluate_health(_summary(1000, 0), [], None).factors[1]
    assert factor.score == 5


def test_six_small_categories_are_excellent_diversity():
    health = evaluate_health(_summary(0, 540, count=6), _categories(6, value=90), BUDGET)
    diversity = health.factors[2]
    assert diversity.score == 20
    assert diversity.status == "excellent"


@pytest.mark.parametrize("n, points", [(0, 5), (2, 5), (3, 12), (4, 12), (5, 20)])
def test_diversity_tiers(n, points):
    assert evaluate_health(_summary(0, 0), _categories(n), BUDGET).factors[2].score == points


@pytest.mark.parametrize("count, points", [(0, 2), (4, 2), (5, 6), (9, 6), (10, 10)])
def test_consistency_tiers(count, points):
    assert evaluate_health(_summary(0, 0, count=count), [], BUDGET).factors[3].score == points


def test_factor_scores_sum_to_composite():
    health = evaluate_health(_summary(1000, 880, count=7), _categories(3), BUDGET)
    assert health.score == sum(f.score for f in health.factors)
    assert 0 <= health.score <= 100
