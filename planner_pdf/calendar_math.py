"""Calendar arithmetic used to size and align the planner pages."""

import calendar
from datetime import date, timedelta
from typing import List

from .config import DAYS_PER_WEEK


def date_to_string(day: date, fmt: str) -> str:
    """``strftime`` with ISO week fields (%V, %G) available everywhere."""
    iso_year, iso_week, _ = day.isocalendar()
    fmt = fmt.replace("%V", f"{iso_week:02d}").replace("%G", f"{iso_year:04d}")
    return day.strftime(fmt)


class CalendarProvider:
    """Thin wrapper over the standard library calendar.

    Weekdays are returned in C encoding (Sunday = 0 ... Saturday = 6).
    """

    def days_in_month(self, year: int, month: int) -> int:
        return calendar.monthrange(year, month)[1]

    def days_of_month(self, year: int, month: int) -> List[date]:
        first = date(year, month, 1)
        return [first + timedelta(days=i) for i in range(self.days_in_month(year, month))]

    def weekday_of(self, day: date) -> int:
        return (day.weekday() + 1) % DAYS_PER_WEEK

    def date_to_string(self, day: date, fmt: str) -> str:
        return date_to_string(day, fmt)

    def weekday_name(self, weekday: int, first_letter_only: bool = False) -> str:
        # calendar.day_abbr is Monday-first
        name = calendar.day_abbr[(weekday - 1) % DAYS_PER_WEEK]
        return name[:1] if first_letter_only else name

    def leading_skip(self, year: int, month: int, first_day_of_week: int) -> int:
        """Number of blank cells before the 1st in a month grid.

        Column 0 is ``first_day_of_week``; the 1st lands in the column
        ``(weekday_of_first - first_day_of_week) mod 7``.
        """
        first = self.weekday_of(date(year, month, 1))
        return (first - first_day_of_week + DAYS_PER_WEEK) % DAYS_PER_WEEK
