#!/usr/bin/env python3
"""Core models and validation helpers for dpick."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime


class ValidationError(Exception):
    pass


class InvalidDateComponent(ValidationError):
    """A month outside 0-11 or a day that does not exist in its month."""


def check_month(month: int) -> int:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidDateComponent(f"Month must be an integer 0-11, got {month!r}")
    if not 0 <= month <= 11:
        raise InvalidDateComponent(f"Month {month} is out of range 0-11")
    return month


def check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"Year must be an integer, got {year!r}")
    return year


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A calendar day with a 0-based month.

    Equality, ordering and hashing go by (year, month, day) only.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        check_year(self.year)
        check_month(self.month)
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise InvalidDateComponent(f"Day must be an integer, got {self.day!r}")
        # calendar.monthrange is proleptic Gregorian for any year
        _, max_day = calendar.monthrange(self.year, self.month + 1)
        if not 1 <= self.day <= max_day:
            raise InvalidDateComponent(
                f"Day {self.day} does not exist in {calendar.month_name[self.month + 1]} {self.year}"
            )

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        if isinstance(value, datetime):
            value = value.date()
        return cls(value.year, value.month - 1, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def same_month(self, other: "CalendarDate") -> bool:
        return self.year == other.year and self.month == other.month

    def __str__(self) -> str:
        return format_date(self)


@dataclass(frozen=True)
class Cell:
    date: CalendarDate
    in_current_period: bool
    is_selected: bool
    is_today: bool
    has_event: bool
    is_reference: bool = False


def parse_date(value: str) -> CalendarDate:
    """Parse ``YYYY-MM-DD`` (1-based month) into a CalendarDate."""
    text = str(value).strip()
    parts = text.split("-")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValidationError(f"Invalid date format: '{text}'. Expected YYYY-MM-DD")
    year, month, day = (int(part) for part in parts)
    if year < 1:
        raise InvalidDateComponent(f"Invalid year in '{text}'")
    if not 1 <= month <= 12:
        raise InvalidDateComponent(f"Invalid month in '{text}'")
    return CalendarDate(year, month - 1, day)


def format_date(value: CalendarDate) -> str:
    return f"{value.year:04d}-{value.month + 1:02d}-{value.day:02d}"


__all__ = [
    "CalendarDate",
    "Cell",
    "ValidationError",
    "InvalidDateComponent",
    "check_month",
    "check_year",
    "parse_date",
    "format_date",
]
