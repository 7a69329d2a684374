#!/usr/bin/env python3
"""Pure calendar calculations for the picker grids.

Months are 0-based (0 = January) and weeks start on Sunday.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar

from models import CalendarDate, check_month, check_year

GRID_CELLS = 42
WEEK_LENGTH = 7
YEAR_WINDOW = 12
YEAR_WINDOW_BACK = 6

WEEKDAY_ABBR: Tuple[str, ...] = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

T = TypeVar("T")


@dataclass(frozen=True)
class MonthDescriptor:
    value: int
    name: str


MONTHS: Tuple[MonthDescriptor, ...] = tuple(
    MonthDescriptor(value=idx, name=calendar.month_abbr[idx + 1]) for idx in range(12)
)


def days_in_month(year: int, month: int) -> int:
    check_year(year)
    check_month(month)
    _, max_day = calendar.monthrange(year, month + 1)
    return max_day


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday."""
    check_year(year)
    check_month(month)
    # calendar.weekday counts from Monday
    return (calendar.weekday(year, month + 1, 1) + 1) % 7


def prev_month(year: int, month: int) -> Tuple[int, int]:
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    if month == 11:
        return year + 1, 0
    return year, month + 1


def build_day_grid(year: int, month: int) -> List[Tuple[CalendarDate, bool]]:
    """Return the 42 (date, in_current_period) pairs of a six-week month grid.

    Leading cells are the last days of the previous month, trailing cells the
    first days of the next one.
    """
    leading = first_weekday(year, month)
    count = days_in_month(year, month)

    prev_year, prev_mon = prev_month(year, month)
    prev_count = days_in_month(prev_year, prev_mon)

    cells: List[Tuple[CalendarDate, bool]] = []
    for day in range(prev_count - leading + 1, prev_count + 1):
        cells.append((CalendarDate(prev_year, prev_mon, day), False))

    for day in range(1, count + 1):
        cells.append((CalendarDate(year, month, day), True))

    next_year, next_mon = next_month(year, month)
    for day in range(1, GRID_CELLS - len(cells) + 1):
        cells.append((CalendarDate(next_year, next_mon, day), False))
    return cells


def build_month_grid() -> Tuple[MonthDescriptor, ...]:
    return MONTHS


def build_year_grid(reference_year: int) -> List[int]:
    check_year(reference_year)
    start = reference_year - YEAR_WINDOW_BACK
    return list(range(start, start + YEAR_WINDOW))


def year_window_start(year: int) -> int:
    return (year // YEAR_WINDOW) * YEAR_WINDOW


def _roll(year: int, month: int, day: int) -> CalendarDate:
    """Build a date letting month and day overflow forward.

    ``month`` may be any integer; a day past the end of the target month
    spills into the following month (Jan 31 -> Feb gives Mar 2 or Mar 3).
    """
    carry, month = divmod(month, 12)
    year += carry
    max_day = days_in_month(year, month)
    if day > max_day:
        day -= max_day
        year, month = next_month(year, month)
    return CalendarDate(year, month, day)


def with_month(value: CalendarDate, month: int) -> CalendarDate:
    check_month(month)
    return _roll(value.year, month, value.day)


def with_year(value: CalendarDate, year: int) -> CalendarDate:
    check_year(year)
    return _roll(year, value.month, value.day)


def shift_date(value: CalendarDate, *, years: int = 0, months: int = 0) -> CalendarDate:
    return _roll(value.year + years, value.month + months, value.day)


def month_name(month: int) -> str:
    check_month(month)
    return calendar.month_name[month + 1]


def weeks(cells: Sequence[T]) -> List[List[T]]:
    return [list(cells[idx : idx + WEEK_LENGTH]) for idx in range(0, len(cells), WEEK_LENGTH)]


__all__ = [
    "GRID_CELLS",
    "MONTHS",
    "MonthDescriptor",
    "WEEKDAY_ABBR",
    "YEAR_WINDOW",
    "build_day_grid",
    "build_month_grid",
    "build_year_grid",
    "days_in_month",
    "first_weekday",
    "month_name",
    "next_month",
    "prev_month",
    "shift_date",
    "weeks",
    "with_month",
    "with_year",
    "year_window_start",
]
