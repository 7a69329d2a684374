#!/usr/bin/env python3
"""Navigation state machine and cell classification for the picker."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from calendar_math import (
    build_day_grid,
    build_month_grid,
    build_year_grid,
    month_name,
    shift_date,
    with_month,
    with_year,
    year_window_start,
)
from models import CalendarDate, Cell, ValidationError
from state import DIRECTIONS, ControllerState, NavigationDirection, ViewMode

SelectCallback = Callable[[CalendarDate], None]
TodayProvider = Callable[[], date]
GridBuilder = Callable[[ControllerState, FrozenSet[CalendarDate], CalendarDate], List[Cell]]


def _coerce_date(value: object) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, date):
        return CalendarDate.from_date(value)
    raise ValidationError(f"Expected a calendar date, got {value!r}")


def _day_cells(
    state: ControllerState, events: FrozenSet[CalendarDate], today: CalendarDate
) -> List[Cell]:
    ref = state.reference_date
    selected = state.selected_date
    cells: List[Cell] = []
    for day, in_period in build_day_grid(ref.year, ref.month):
        is_selected = day == selected
        cells.append(
            Cell(
                date=day,
                in_current_period=in_period,
                is_selected=is_selected,
                # selected styling hides both markers
                is_today=day == today and not is_selected,
                has_event=day in events and not is_selected,
                is_reference=day == ref,
            )
        )
    return cells


def _month_cells(
    state: ControllerState, events: FrozenSet[CalendarDate], today: CalendarDate
) -> List[Cell]:
    year = state.reference_date.year
    selected = state.selected_date
    event_months = {(ev.year, ev.month) for ev in events}
    cells: List[Cell] = []
    for month in build_month_grid():
        is_selected = (
            selected is not None and selected.year == year and selected.month == month.value
        )
        cells.append(
            Cell(
                date=CalendarDate(year, month.value, 1),
                in_current_period=True,
                is_selected=is_selected,
                is_today=today.year == year and today.month == month.value and not is_selected,
                has_event=(year, month.value) in event_months and not is_selected,
                is_reference=state.reference_date.month == month.value,
            )
        )
    return cells


def _year_cells(
    state: ControllerState, events: FrozenSet[CalendarDate], today: CalendarDate
) -> List[Cell]:
    ref_year = state.reference_date.year
    selected = state.selected_date
    event_years = {ev.year for ev in events}
    cells: List[Cell] = []
    for year in build_year_grid(ref_year):
        is_selected = selected is not None and selected.year == year
        cells.append(
            Cell(
                date=CalendarDate(year, 0, 1),
                in_current_period=True,
                is_selected=is_selected,
                is_today=today.year == year and not is_selected,
                has_event=year in event_years and not is_selected,
                is_reference=year == ref_year,
            )
        )
    return cells


GRID_BUILDERS: Dict[ViewMode, GridBuilder] = {
    "days": _day_cells,
    "months": _month_cells,
    "years": _year_cells,
}

# (years, months) moved by one navigate step
NAVIGATION_STEPS: Dict[ViewMode, Tuple[int, int]] = {
    "days": (0, 1),
    "months": (1, 0),
    "years": (12, 0),
}

PERIOD_KEYS: Dict[ViewMode, Callable[[CalendarDate], Tuple[int, ...]]] = {
    "days": lambda d: (d.year, d.month),
    "months": lambda d: (d.year,),
    "years": lambda d: (year_window_start(d.year),),
}


class CalendarController:
    """Owns the picker state and applies navigation commands to it.

    Every mutating call returns the resulting ``ControllerState`` snapshot.
    """

    def __init__(
        self,
        selected: Optional[CalendarDate] = None,
        events: Iterable[CalendarDate] = (),
        on_select: Optional[SelectCallback] = None,
        today: TodayProvider = date.today,
        reference_date: Optional[CalendarDate] = None,
    ) -> None:
        self._today = today
        self._on_select = on_select
        self._events: FrozenSet[CalendarDate] = frozenset(_coerce_date(ev) for ev in events)
        if reference_date is None:
            reference = CalendarDate.from_date(today())
        else:
            reference = _coerce_date(reference_date)
        self.state = ControllerState(
            reference_date=reference,
            selected_date=None if selected is None else _coerce_date(selected),
        )

    # Accessors
    @property
    def view_mode(self) -> ViewMode:
        return self.state.view_mode

    @property
    def reference_date(self) -> CalendarDate:
        return self.state.reference_date

    @property
    def selected_date(self) -> Optional[CalendarDate]:
        return self.state.selected_date

    @property
    def last_direction(self) -> NavigationDirection:
        return self.state.last_direction

    @property
    def is_drill_transition(self) -> bool:
        return self.state.is_drill_transition

    @property
    def events(self) -> FrozenSet[CalendarDate]:
        return self._events

    def _update(self, **changes: object) -> ControllerState:
        self.state = replace(self.state, **changes)
        return self.state

    def _current_day(self) -> CalendarDate:
        return CalendarDate.from_date(self._today())

    # Selection
    def select_date(self, value: CalendarDate) -> ControllerState:
        value = _coerce_date(value)
        state = self._update(selected_date=value)
        if self._on_select is not None:
            self._on_select(value)
        return state

    def sync_selected(self, value: Optional[CalendarDate]) -> ControllerState:
        """Replace the selection from the host without notifying ``on_select``."""
        return self._update(selected_date=None if value is None else _coerce_date(value))

    def set_events(self, events: Iterable[CalendarDate]) -> None:
        self._events = frozenset(_coerce_date(ev) for ev in events)

    # Navigation
    def navigate(self, direction: NavigationDirection) -> ControllerState:
        if direction not in DIRECTIONS:
            raise ValidationError(f"Unknown direction '{direction}'. Expected one of: {', '.join(DIRECTIONS)}")
        years, months = NAVIGATION_STEPS[self.state.view_mode]
        sign = -1 if direction == "backward" else 1
        reference = shift_date(self.state.reference_date, years=sign * years, months=sign * months)
        return self._update(
            reference_date=reference,
            last_direction=direction,
            is_drill_transition=False,
        )

    def drill_into_month(self, month: int) -> ControllerState:
        reference = with_month(self.state.reference_date, month)
        return self._update(reference_date=reference, view_mode="days", is_drill_transition=True)

    def drill_into_year(self, year: int) -> ControllerState:
        reference = with_year(self.state.reference_date, year)
        return self._update(reference_date=reference, view_mode="days", is_drill_transition=True)

    def toggle_month_view(self) -> ControllerState:
        view: ViewMode = "days" if self.state.view_mode == "months" else "months"
        return self._update(view_mode=view, is_drill_transition=True)

    def toggle_year_view(self) -> ControllerState:
        view: ViewMode = "months" if self.state.view_mode == "years" else "years"
        return self._update(view_mode=view, is_drill_transition=True)

    def jump_to_today(self) -> ControllerState:
        today = self._current_day()
        period_key = PERIOD_KEYS[self.state.view_mode]
        shown = period_key(self.state.reference_date)
        target = period_key(today)
        if shown == target:
            return self.state
        direction: NavigationDirection = "backward" if shown > target else "forward"
        return self._update(
            reference_date=today,
            view_mode="days",
            last_direction=direction,
            is_drill_transition=False,
        )

    # Rendering
    def render_grid(self) -> List[Cell]:
        builder = GRID_BUILDERS[self.state.view_mode]
        return builder(self.state, self._events, self._current_day())

    def header_label(self) -> str:
        ref = self.state.reference_date
        return f"{month_name(ref.month)} {ref.year}"

    def transition_key(self) -> Tuple[ViewMode, int, int]:
        ref = self.state.reference_date
        return (self.state.view_mode, ref.month, ref.year)


__all__ = [
    "CalendarController",
    "GRID_BUILDERS",
    "NAVIGATION_STEPS",
    "PERIOD_KEYS",
    "SelectCallback",
    "TodayProvider",
]
