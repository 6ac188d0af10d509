"""Shared API dependencies."""

from datetime import date

from fastapi import Query

from finance_tracker.config import settings
from finance_tracker.core.storage import get_store
from finance_tracker.services.periods import today_in


def get_reference_date(
    as_of: date | None = Query(
        None, description="Date treated as 'now' for month windows (default: today)"
    ),
) -> date:
    """Reference date for analytics; today in the configured timezone by default."""
    return as_of or today_in(settings.app_timezone)


__all__ = ["get_store", "get_reference_date"]
