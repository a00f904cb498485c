"""Month calendar blocks, drawn full size on a month page and in miniature
inside a year page's month cells."""

from typing import List

from .calendar_math import CalendarProvider
from .config import DAYS_PER_WEEK, MONTH_GRID
from .grid import GridLabel, GridLayout, Region, create_grid
from .nodes import MonthPeriod, PageNode


def weekday_labels(calendar: CalendarProvider, first_day_of_week: int,
                   first_letter_only: bool = False) -> List[GridLabel]:
    return [GridLabel(calendar.weekday_name((i + first_day_of_week) % DAYS_PER_WEEK,
                                            first_letter_only))
            for i in range(DAYS_PER_WEEK)]


def weekday_header(surface, region: Region, calendar: CalendarProvider,
                   first_day_of_week: int, padding: float, font_size: float,
                   page_height: float, first_letter_only: bool = False) -> GridLayout:
    labels = weekday_labels(calendar, first_day_of_week, first_letter_only)
    return create_grid(surface, region, 1, DAYS_PER_WEEK, labels,
                       create_links=False, padding=padding, page_height=page_height,
                       label_in_middle=True, font_size=font_size)


def days_grid(surface, region: Region, month: PageNode, days: List[PageNode],
              calendar: CalendarProvider, first_day_of_week: int, padding: float,
              font_size: float, page_height: float) -> GridLayout:
    """6x7 grid of day links, the 1st placed under its weekday column."""
    period: MonthPeriod = month.period
    skip = calendar.leading_skip(period.year, period.month, first_day_of_week)
    rows, cols = MONTH_GRID
    return create_grid(surface, region, rows, cols, days,
                       create_links=True, skip=skip, padding=padding,
                       page_height=page_height, label_in_middle=True, font_size=font_size)
