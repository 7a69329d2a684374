from datetime import date, datetime

import pytest

from models import (
    CalendarDate,
    InvalidDateComponent,
    ValidationError,
    format_date,
    parse_date,
)


def test_parse_date_uses_one_based_months() -> None:
    value = parse_date(" 2024-01-18 ")

    assert value == CalendarDate(2024, 0, 18)
    assert format_date(value) == "2024-01-18"
    assert str(CalendarDate(2024, 11, 5)) == "2024-12-05"


def test_parse_date_rejects_malformed_text() -> None:
    with pytest.raises(ValidationError):
        parse_date("18/01/2024")
    with pytest.raises(InvalidDateComponent):
        parse_date("2024-13-01")
    with pytest.raises(InvalidDateComponent):
        parse_date("2023-02-29")


def test_calendar_date_rejects_impossible_components() -> None:
    with pytest.raises(InvalidDateComponent):
        CalendarDate(2024, 12, 1)
    with pytest.raises(InvalidDateComponent):
        CalendarDate(2024, 3, 31)
    with pytest.raises(InvalidDateComponent):
        CalendarDate(2024, 0, 0)
    with pytest.raises(ValidationError):
        CalendarDate(2024.0, 0, 1)  # type: ignore[arg-type]

    assert CalendarDate(2024, 1, 29).day == 29


def test_calendar_day_equality_ignores_time() -> None:
    morning = CalendarDate.from_date(datetime(2024, 1, 18, 8, 30))
    evening = CalendarDate.from_date(datetime(2024, 1, 18, 21, 0))

    assert morning == evening
    assert len({morning, evening, CalendarDate(2024, 0, 18)}) == 1
    assert morning.to_date() == date(2024, 1, 18)
    assert morning.same_month(CalendarDate(2024, 0, 1))
    assert not morning.same_month(CalendarDate(2025, 0, 1))
