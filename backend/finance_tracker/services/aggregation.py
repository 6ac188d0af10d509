"""Aggregates over transaction lists: summaries, category totals, trends
and the fixed-length monthly series used by the charts.

All functions are pure; the reference date is always passed in.
"""

from datetime import date
from typing import Iterable

from finance_tracker.schemas.analytics import CategoryTotal, MonthlyPoint, Summary, TrendResult
from finance_tracker.schemas.transaction import Transaction
from finance_tracker.services.periods import MonthKey, transactions_in_month


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """Fold transactions into income/expense totals and a count."""
    income = 0.0
    expenses = 0.0
    count = 0
    for t in transactions:
        if t.type == "income":
            income += t.amount
        elif t.type == "expense":
            expenses += t.amount
        count += 1
    return Summary(
        income=income,
        expenses=expenses,
        balance=income - expenses,
        transaction_count=count,
    )


def expenses_by_category(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    """Expense totals per category id, largest first.

    The display name is the snapshot of the first transaction seen for the
    category. Ties keep first-seen order.
    """
    totals: dict[str, float] = {}
    names: dict[str, str] = {}
    for t in transactions:
        if t.type != "expense":
            continue
        if t.category not in totals:
            totals[t.category] = 0.0
            names[t.category] = t.category_name
        totals[t.category] += t.amount

    entries = [
        CategoryTotal(category=cat_id, name=names[cat_id], value=value)
        for cat_id, value in totals.items()
    ]
    entries.sort(key=lambda e: e.value, reverse=True)
    return entries


def month_summary(transactions: Iterable[Transaction], month: MonthKey) -> Summary:
    return summarize(transactions_in_month(transactions, month))


def percent_change(current: float, previous: float) -> float:
    """Change from ``previous`` to ``current`` in percent, one decimal.

    A zero (or negative) previous value gives 0 instead of a division error.
    """
    if previous <= 0:
        return 0.0
    return round((current - previous) / previous * 100, 1)


def calculate_trends(transactions: list[Transaction], today: date) -> TrendResult:
    """Compare the reference month with the month before it."""
    current_month = MonthKey.of(today)
    current = month_summary(transactions, current_month)
    last = month_summary(transactions, current_month.previous())

    return TrendResult(
        income_change=percent_change(current.income, last.income),
        expense_change=percent_change(current.expenses, last.expenses),
        transaction_count_change=percent_change(
            current.transaction_count, last.transaction_count
        ),
        current_income=current.income,
        current_expenses=current.expenses,
        last_income=last.income,
        last_expenses=last.expenses,
    )


def monthly_series(
    transactions: list[Transaction], today: date, months: int = 6
) -> list[MonthlyPoint]:
    """Exactly ``months`` points, oldest first, ending at the reference month.

    Months without transactions are zero-filled rather than skipped.
    """
    if months < 1:
        return []

    # One pass to bucket, then read the window back in order
    buckets: dict[MonthKey, list[Transaction]] = {}
    for t in transactions:
        buckets.setdefault(MonthKey.of(t.date), []).append(t)

    end = MonthKey.of(today)
    series = []
    for offset in range(months - 1, -1, -1):
        month = end.shift(-offset)
        summary = summarize(buckets.get(month, []))
        series.append(
            MonthlyPoint(
                period=month.period,
                month=month.label,
                income=summary.income,
                expenses=summary.expenses,
                savings=summary.balance,
            )
        )
    return series
