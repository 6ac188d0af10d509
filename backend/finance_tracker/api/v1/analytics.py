"""Analytics API routes: summaries, breakdowns, trends and advice.

Every route takes an optional ``as_of`` date; months are computed
relative to it.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from finance_tracker.api.deps import get_reference_date, get_store
from finance_tracker.config import settings
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
from finance_tracker.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/summary", response_model=Summary)
def summary(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    """Income, expenses, balance and count for the reference month."""
    return AnalyticsService(store).summary(today)


@router.get("/by-category", response_model=list[CategoryTotal])
def by_category(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    """Expense totals per category for the reference month, largest first."""
    return AnalyticsService(store).by_category(today)


@router.get("/monthly", response_model=list[MonthlyPoint])
def monthly(
    months: int | None = Query(None, ge=1, le=24),
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    """Income/expenses/savings for the last ``months`` months, oldest first."""
    return AnalyticsService(store).monthly(today, months or settings.monthly_series_months)


@router.get("/trends", response_model=TrendResult)
def trends(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    return AnalyticsService(store).trends(today)


@router.get("/health-score", response_model=HealthScore)
def health_score(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    return AnalyticsService(store).health(today)


@router.get("/advice", response_model=list[Advisory])
def advice(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    """Health-score card followed by every advisory whose rule fires."""
    return AnalyticsService(store).advice(today)


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    today: date = Depends(get_reference_date),
    store: JsonStore = Depends(get_store),
):
    return AnalyticsService(store).dashboard(today)
