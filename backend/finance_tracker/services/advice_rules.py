"""Rule-based financial advice.

Every rule is a plain function ``rule(ctx) -> Advisory | None`` over the
same read-only :class:`AdviceContext`. Rules run in the order of
``ADVICE_RULES``; none of them looks at another's output, so any number
may fire in one evaluation. The health-score card always comes first.

Thresholds are fixed product constants, not settings.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Callable

from finance_tracker.schemas.analytics import (
    Advisory,
    CategoryTotal,
    HealthScore,
    Summary,
    TrendResult,
)
from finance_tracker.schemas.budget import Budget
from finance_tracker.schemas.transaction import Transaction
from finance_tracker.services.aggregation import (
    calculate_trends,
    expenses_by_category,
    summarize,
)
from finance_tracker.services.health_score import evaluate_health, savings_rate
from finance_tracker.services.periods import MonthKey, transactions_in_month
from finance_tracker.utils.formatting import format_currency

EMERGENCY_FUND_TARGET = 3000
EMERGENCY_FUND_MAX_MONTHS = 6


@dataclass(frozen=True)
class AdviceContext:
    summary: Summary
    categories: list[CategoryTotal]
    trends: TrendResult
    health: HealthScore
    budget: Budget | None

    def share_of_expenses(self, category: CategoryTotal) -> float:
        """Percent of the month's expenses spent in ``category``."""
        if self.summary.expenses <= 0:
            return 0.0
        return category.value / self.summary.expenses * 100

    def find_category(self, *keywords: str) -> CategoryTotal | None:
        """Largest category whose display name contains any keyword."""
        for category in self.categories:
            name = category.name.lower()
            if any(keyword in name for keyword in keywords):
                return category
        return None


Rule = Callable[[AdviceContext], Advisory | None]


def health_score_advisory(health: HealthScore) -> Advisory:
    return Advisory(
        type="health-score",
        title="Financial Health Score",
        message=f"Your current financial health score is {health.score}/100",
        score=health.score,
        factors=health.factors,
        icon="📊",
    )


# ── Savings ────────────────────────────────────────


def savings_rate_rule(ctx: AdviceContext) -> Advisory | None:
    rate = savings_rate(ctx.summary)
    if rate >= 20:
        return Advisory(
            type="success",
            title="🎯 Excellent Savings Rate!",
            message=(
                f"You're saving {rate:.1f}% of your income ({format_currency(ctx.summary.balance)}). "
                "This is above the recommended 20% threshold. Consider investing your savings "
                "for long-term growth through diversified index funds or retirement accounts."
            ),
            action="View Investment Options",
            action_link="investments",
        )
    if rate >= 10:
        return Advisory(
            type="warning",
            title="💡 Good Start on Savings",
            message=(
                f"You're saving {rate:.1f}% of your income. Try to increase this to 20% by "
                "reducing non-essential expenses like dining out and entertainment. "
                "Small adjustments can make a big difference!"
            ),
            action="See Budget Tips",
            action_link="settings",
        )
    return Advisory(
        type="danger",
        title="⚠️ Low Savings Alert",
        message=(
            f"You're only saving {rate:.1f}% of your income. This is below the recommended 20%. "
            "Review your top expense categories and identify areas to cut back. "
            "Start with tracking every purchase for a week."
        ),
        action="Review Expenses",
        action_link="transactions",
    )


# ── Category concentration ─────────────────────────


def top_category_rule(ctx: AdviceContext) -> Advisory | None:
    if not ctx.categories or ctx.summary.expenses <= 0:
        return None
    top = ctx.categories[0]
    share = round(ctx.share_of_expenses(top), 1)
    if share <= 40:
        return None
    return Advisory(
        type="info",
        title=f"📊 High {top.name} Spending",
        message=(
            f"{share:.1f}% of your expenses ({format_currency(top.value)}) went to {top.name}. "
            "This is above the recommended 30% for any single category. "
            "Consider setting a specific budget for this category."
        ),
        action=f"Set {top.name} Budget",
        action_link="settings",
    )


def spending_patterns_rule(ctx: AdviceContext) -> Advisory | None:
    heavy = [c for c in ctx.categories if ctx.share_of_expenses(c) > 25]
    if len(heavy) <= 1:
        return None
    names = ", ".join(c.name for c in heavy)
    return Advisory(
        type="info",
        title="🔍 Spending Patterns Detected",
        message=(
            f"Multiple categories are taking significant portions of your budget: {names}. "
            "Consider consolidating or reducing spending in these areas."
        ),
    )


# ── Budget ─────────────────────────────────────────


def budget_status_rule(ctx: AdviceContext) -> Advisory | None:
    budget = ctx.budget
    if budget is None:
        return None
    expenses = ctx.summary.expenses
    limit = budget.monthly_limit

    if expenses > limit:
        return Advisory(
            type="danger",
            title="🚨 Budget Exceeded",
            message=(
                f"You've exceeded your monthly budget by {format_currency(expenses - limit)}. "
                "This month, prioritize essential expenses and defer non-essential "
                "purchases to next month."
            ),
            action="Adjust Budget",
            action_link="settings",
        )
    if expenses > limit * (budget.alert_threshold / 100):
        used = expenses / limit * 100
        return Advisory(
            type="warning",
            title="⚡ Budget Warning",
            message=(
                f"You've used {used:.0f}% of your budget. You have "
                f"{format_currency(limit - expenses)} remaining for the rest of the month."
            ),
            action="View Remaining Budget",
            action_link="dashboard",
        )
    if expenses < limit * 0.5:
        used = expenses / limit * 100
        return Advisory(
            type="success",
            title="✅ Under Budget!",
            message=(
                f"Great job! You've only used {used:.0f}% of your budget. Consider saving the "
                f"remaining {format_currency(limit - expenses)} or treating yourself to "
                "something you've been wanting."
            ),
        )
    # Between half the limit and the alert threshold: nothing to say
    return None


# ── Trend ──────────────────────────────────────────


def expense_trend_rule(ctx: AdviceContext) -> Advisory | None:
    change = ctx.trends.expense_change
    if change > 20:
        return Advisory(
            type="warning",
            title="📈 Spending Increasing",
            message=(
                f"Your expenses increased by {change:.1f}% compared to last month. Review your "
                "recent transactions to identify unexpected or unnecessary spending."
            ),
            action="Compare Months",
            action_link="charts",
        )
    if change < -10:
        return Advisory(
            type="success",
            title="📉 Spending Decreased",
            message=(
                f"Great news! Your expenses decreased by {abs(change):.1f}% compared to last "
                "month. Keep up the good work and consider setting new savings goals."
            ),
        )
    return None


# ── Income vs expenses ─────────────────────────────


def cash_flow_rule(ctx: AdviceContext) -> Advisory | None:
    summary = ctx.summary
    if summary.income <= 0:
        return None
    if summary.expenses > summary.income:
        return Advisory(
            type="danger",
            title="⚠️ Spending Exceeds Income",
            message=(
                "You're spending more than you're earning. This is not sustainable long-term. "
                "Consider increasing income through side gigs or reducing expenses immediately."
            ),
            action="Create Action Plan",
            action_link="advice",
        )
    if summary.balance > 0:
        return Advisory(
            type="success",
            title="💰 Positive Cash Flow",
            message=(
                f"You have a monthly surplus of {format_currency(summary.balance)}. At this rate, "
                f"you'll save approximately {format_currency(summary.balance * 12)} this year! "
                "Consider automating your savings."
            ),
            action="Set Savings Goal",
            action_link="settings",
        )
    return None


# ── Spending habits (matched on category display name) ──


def _habit_rule(keywords: tuple[str, ...], threshold: float, title: str, message: str) -> Rule:
    def rule(ctx: AdviceContext) -> Advisory | None:
        category = ctx.find_category(*keywords)
        if category is None or ctx.share_of_expenses(category) <= threshold:
            return None
        return Advisory(type="info", title=title, message=message)

    rule.__name__ = f"habit_rule_{keywords[0]}"
    return rule


shopping_habit_rule = _habit_rule(
    ("shopping", "other"),
    20,
    "🛍️ Shopping Habits",
    "Consider implementing a 24-hour rule for non-essential purchases. "
    "Wait a day before buying to avoid impulse spending.",
)

dining_habit_rule = _habit_rule(
    ("food", "dining"),
    25,
    "🍔 Dining Out",
    "Try meal prepping for work to reduce dining expenses. "
    "Even packing lunch twice a week can save you significant money.",
)

entertainment_habit_rule = _habit_rule(
    ("entertainment",),
    15,
    "🎬 Entertainment Budget",
    "Look for free or low-cost entertainment options in your area. Many communities "
    "offer free events, outdoor activities, and cultural experiences.",
)


# ── Long-term goals ────────────────────────────────


def emergency_fund_rule(ctx: AdviceContext) -> Advisory | None:
    balance = ctx.summary.balance
    if balance <= 0:
        return None
    months = math.ceil(EMERGENCY_FUND_TARGET / balance)
    if months > EMERGENCY_FUND_MAX_MONTHS:
        return None
    return Advisory(
        type="success",
        title="🏆 Emergency Fund Goal",
        message=(
            f"At your current savings rate, you could build a "
            f"{format_currency(EMERGENCY_FUND_TARGET)} emergency fund in about {months} months! "
            "Start by automating your savings each payday."
        ),
        action="Set Emergency Fund Goal",
        action_link="settings",
    )


ADVICE_RULES: tuple[Rule, ...] = (
    savings_rate_rule,
    top_category_rule,
    spending_patterns_rule,
    budget_status_rule,
    expense_trend_rule,
    cash_flow_rule,
    shopping_habit_rule,
    dining_habit_rule,
    entertainment_habit_rule,
    emergency_fund_rule,
)


def generate_advice(ctx: AdviceContext, rules: tuple[Rule, ...] = ADVICE_RULES) -> list[Advisory]:
    """Health-score card followed by whatever each rule emits, in rule order."""
    advice = [health_score_advisory(ctx.health)]
    for rule in rules:
        advisory = rule(ctx)
        if advisory is not None:
            advice.append(advisory)
    return advice


def build_context(
    transactions: list[Transaction], budget: Budget | None, today: date
) -> AdviceContext:
    """Run the aggregation pipeline for the reference month."""
    month = MonthKey.of(today)
    current = transactions_in_month(transactions, month)
    summary = summarize(current)
    categories = expenses_by_category(current)
    return AdviceContext(
        summary=summary,
        categories=categories,
        trends=calculate_trends(transactions, today),
        health=evaluate_health(summary, categories, budget),
        budget=budget,
    )


def financial_advice(
    transactions: list[Transaction], budget: Budget | None, today: date
) -> list[Advisory]:
    return generate_advice(build_context(transactions, budget, today))
