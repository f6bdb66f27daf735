"""
Calendar date windows in a reference timezone.

"Today" is evaluated in the configured timezone so a user's month boundary
does not depend on the server clock.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from ..config.baseline_config import BASELINE_CONFIG


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range."""
    start: date
    end: date

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end


def _shift_month(year: int, month: int, months_back: int):
    m = month - months_back
    y = year
    while m <= 0:
        m += 12
        y -= 1
    return y, m


class DateWindows:
    """Builds month and day windows relative to today in a reference timezone."""

    def __init__(self, timezone_name: Optional[str] = None):
        self.timezone_name = timezone_name or BASELINE_CONFIG["reference_timezone"]
        self.timezone = ZoneInfo(self.timezone_name)

    def today(self) -> date:
        return datetime.now(self.timezone).date()

    def month(self, year: int, month: int) -> DateRange:
        last_day = calendar.monthrange(year, month)[1]
        return DateRange(date(year, month, 1), date(year, month, last_day))

    def current_month(self, today: Optional[date] = None) -> DateRange:
        today = today or self.today()
        return self.month(today.year, today.month)

    def last_90_days(self, today: Optional[date] = None) -> DateRange:
        today = today or self.today()
        return DateRange(today - timedelta(days=90), today)

    def last_n_months(self, months: int, today: Optional[date] = None) -> DateRange:
        """
        The last N calendar months, counting the current (partial) month.

        Example: today 2025-05-18, months=3 -> 2025-03-01 .. 2025-05-31
        """
        if months < 1:
            raise ValueError(f"months must be at least 1, got {months}")

        today = today or self.today()
        start_year, start_month = _shift_month(today.year, today.month, months - 1)
        return DateRange(
            date(start_year, start_month, 1),
            self.current_month(today).end
        )

    def is_current_month(self, d: date, today: Optional[date] = None) -> bool:
        return self.current_month(today).contains(d)
