import pytest

from calendar_math import (
    GRID_CELLS,
    build_day_grid,
    build_month_grid,
    build_year_grid,
    days_in_month,
    first_weekday,
    month_name,
    shift_date,
    weeks,
    with_month,
    with_year,
    year_window_start,
)
from models import CalendarDate, InvalidDateComponent


def _leading_out_of_period(grid) -> int:
    count = 0
    for _, in_period in grid:
        if in_period:
            break
        count += 1
    return count


@pytest.mark.parametrize("year", [1900, 1999, 2000, 2023, 2024, 2025, 2100])
def test_day_grid_is_always_six_full_weeks(year: int) -> None:
    for month in range(12):
        grid = build_day_grid(year, month)
        assert len(grid) == GRID_CELLS
        in_period = [day for day, flag in grid if flag]
        assert len(in_period) == days_in_month(year, month)
        assert [day.day for day in in_period] == list(range(1, days_in_month(year, month) + 1))
        assert _leading_out_of_period(grid) == first_weekday(year, month)


def test_leap_years_follow_gregorian_rule() -> None:
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2023, 1) == 28
    assert days_in_month(1900, 1) == 28
    assert days_in_month(2000, 1) == 29
    assert days_in_month(2024, 3) == 30
    assert days_in_month(2024, 11) == 31


def test_first_weekday_counts_from_sunday() -> None:
    # 2024-01-01 was a Monday, 2024-12-01 a Sunday, 2024-03-01 a Friday
    assert first_weekday(2024, 0) == 1
    assert first_weekday(2024, 11) == 0
    assert first_weekday(2024, 2) == 5


def test_january_grid_pulls_days_from_previous_december() -> None:
    grid = build_day_grid(2024, 0)

    assert grid[0] == (CalendarDate(2023, 11, 31), False)
    assert grid[1] == (CalendarDate(2024, 0, 1), True)
    assert grid[-1] == (CalendarDate(2024, 1, 10), False)


def test_december_grid_rolls_trailing_days_into_next_year() -> None:
    grid = build_day_grid(2024, 11)

    trailing = [day for day, flag in grid[31:]]
    assert all(not flag for _, flag in grid[31:])
    assert trailing == [CalendarDate(2025, 0, day) for day in range(1, 12)]


def test_february_starting_on_sunday_has_no_leading_days() -> None:
    grid = build_day_grid(2026, 1)

    assert grid[0] == (CalendarDate(2026, 1, 1), True)
    assert grid[28:] == [(CalendarDate(2026, 2, day), False) for day in range(1, 15)]


def test_month_grid_is_fixed_jan_to_dec() -> None:
    months = build_month_grid()

    assert [m.value for m in months] == list(range(12))
    assert months[0].name == "Jan"
    assert months[11].name == "Dec"
    assert build_month_grid() == months


def test_year_grid_is_a_twelve_year_window() -> None:
    assert build_year_grid(2024) == list(range(2018, 2030))
    assert build_year_grid(3) == list(range(-3, 9))


def test_year_window_start_uses_floor_division() -> None:
    assert year_window_start(2024) == 2016
    assert year_window_start(2028) == 2028
    assert year_window_start(2039) == 2028


def test_month_out_of_range_is_rejected() -> None:
    with pytest.raises(InvalidDateComponent):
        days_in_month(2024, 12)
    with pytest.raises(InvalidDateComponent):
        first_weekday(2024, -1)
    with pytest.raises(InvalidDateComponent):
        build_day_grid(2024, 12)
    with pytest.raises(InvalidDateComponent):
        with_month(CalendarDate(2024, 0, 1), 12)


def test_month_change_overflows_into_following_month() -> None:
    assert with_month(CalendarDate(2024, 0, 31), 1) == CalendarDate(2024, 2, 2)
    assert with_month(CalendarDate(2023, 0, 31), 1) == CalendarDate(2023, 2, 3)
    assert with_month(CalendarDate(2024, 4, 31), 5) == CalendarDate(2024, 6, 1)
    assert with_month(CalendarDate(2024, 4, 15), 5) == CalendarDate(2024, 5, 15)


def test_year_change_keeps_month_and_day_or_overflows_leap_day() -> None:
    assert with_year(CalendarDate(2024, 6, 4), 1999) == CalendarDate(1999, 6, 4)
    assert with_year(CalendarDate(2024, 1, 29), 2023) == CalendarDate(2023, 2, 1)


def test_shift_date_crosses_year_boundaries() -> None:
    assert shift_date(CalendarDate(2024, 11, 5), months=1) == CalendarDate(2025, 0, 5)
    assert shift_date(CalendarDate(2024, 0, 5), months=-1) == CalendarDate(2023, 11, 5)
    assert shift_date(CalendarDate(2024, 0, 5), years=-12) == CalendarDate(2012, 0, 5)


def test_month_name_and_weeks() -> None:
    assert month_name(0) == "January"
    rows = weeks(build_day_grid(2024, 0))
    assert len(rows) == 6
    assert all(len(row) == 7 for row in rows)
