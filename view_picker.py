#!/usr/bin/env python3
"""Picker grid rendering."""

from __future__ import annotations

import curses
from typing import Dict, List, Sequence

from calendar_math import MONTHS, WEEK_LENGTH, WEEKDAY_ABBR, weeks
from models import Cell
from state import ViewMode
from ui_base import clamp, safe_addnstr

EVENT_MARK = "•"

COLUMNS: Dict[ViewMode, int] = {"days": WEEK_LENGTH, "months": 4, "years": 4}
CELL_WIDTHS: Dict[ViewMode, int] = {"days": 5, "months": 7, "years": 7}


def cell_label(cell: Cell, view: ViewMode) -> str:
    if view == "days":
        text = f"{cell.date.day:2d}"
    elif view == "months":
        text = MONTHS[cell.date.month].name
    else:
        text = str(cell.date.year)
    if cell.has_event:
        text += EVENT_MARK
    return text


def cell_attr(cell: Cell, *, under_cursor: bool) -> int:
    attr = 0
    if not cell.in_current_period:
        attr |= curses.A_DIM
    if cell.is_today:
        attr |= curses.A_BOLD
    if cell.is_selected:
        attr |= curses.A_REVERSE
    if under_cursor:
        attr |= curses.A_UNDERLINE
    return attr


class PickerView:
    def __init__(self, view: ViewMode, cells: Sequence[Cell]):
        self.view = view
        self.cells = list(cells)

    @property
    def columns(self) -> int:
        return COLUMNS[self.view]

    def render(self, stdscr: "curses.window", cursor: int, top: int = 2) -> None:  # type: ignore[name-defined]
        h, w = stdscr.getmaxyx()
        if h - 1 <= top or w <= 0:
            return
        cell_w = CELL_WIDTHS[self.view]
        if cell_w * self.columns > w:
            cell_w = max(3, w // self.columns)

        y = top
        if self.view == "days":
            for idx, name in enumerate(WEEKDAY_ABBR):
                safe_addnstr(stdscr, y, idx * cell_w, name.rjust(cell_w - 1), cell_w, curses.A_DIM)
            y += 1

        for row_idx, row in enumerate(self._rows()):
            row_y = y + row_idx
            if row_y >= h - 1:
                break
            for col_idx, cell in enumerate(row):
                index = row_idx * self.columns + col_idx
                text = cell_label(cell, self.view).rjust(cell_w - 1)
                attr = cell_attr(cell, under_cursor=index == cursor)
                safe_addnstr(stdscr, row_y, col_idx * cell_w, text, cell_w - 1, attr)

    def _rows(self) -> List[List[Cell]]:
        if self.view == "days":
            return weeks(self.cells)
        return [
            self.cells[idx : idx + self.columns]
            for idx in range(0, len(self.cells), self.columns)
        ]

    def move_cursor(self, cursor: int, delta_cols: int, delta_rows: int) -> int:
        target = cursor + delta_cols + delta_rows * self.columns
        return clamp(target, 0, len(self.cells) - 1)

    def reference_index(self) -> int:
        for idx, cell in enumerate(self.cells):
            if cell.is_reference:
                return idx
        return 0


__all__ = ["PickerView", "cell_attr", "cell_label", "COLUMNS"]
