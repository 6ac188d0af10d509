"""Calendar-month bucketing.

Months are (year, month) pairs, never day-count windows. Transaction
dates are calendar dates as recorded; "today" is derived in the
configured timezone and then compared on the same calendar.
"""

from datetime import date, datetime
from typing import Iterable, NamedTuple
from zoneinfo import ZoneInfo

from finance_tracker.schemas.transaction import Transaction


class MonthKey(NamedTuple):
    year: int
    month: int  # 1..12

    @classmethod
    def of(cls, day: date) -> "MonthKey":
        return cls(day.year, day.month)

    def shift(self, months: int) -> "MonthKey":
        """Move by ``months`` (may be negative), wrapping across years."""
        index = self.year * 12 + (self.month - 1) + months
        return MonthKey(index // 12, index % 12 + 1)

    def previous(self) -> "MonthKey":
        return self.shift(-1)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        return self.first_day().strftime("%b")


def today_in(timezone: str) -> date:
    """Current calendar date in ``timezone``."""
    return datetime.now(ZoneInfo(timezone)).date()


def in_month(day: date, month: MonthKey) -> bool:
    return day.year == month.year and day.month == month.month


def transactions_in_month(
    transactions: Iterable[Transaction], month: MonthKey
) -> list[Transaction]:
    """Transactions dated within ``month``, input order preserved."""
    return [t for t in transactions if in_month(t.date, month)]
