#!/usr/bin/env python3
"""Orchestrator for dpick."""
from __future__ import annotations

import curses
from datetime import date
from typing import Callable, Optional

from config import Config, load_config
from controller import CalendarController
from help_content import HELP_LINES
from keys import (
    KEY_CAP_H,
    KEY_CAP_L,
    KEY_CAP_Q,
    KEY_ESC,
    KEY_EVENT,
    KEY_H,
    KEY_HELP,
    KEY_J,
    KEY_K,
    KEY_L,
    KEY_MONTHS,
    KEY_Q,
    KEY_TODAY,
    KEY_YEARS,
    KEYS_ENTER,
)
from models import CalendarDate
from state import AppState
from store import StorageError, load_events, toggle_event
from ui_base import draw_centered_box, draw_footer, draw_header
from view_picker import PickerView

FOOTER = "q: quit   ?: help   H/L: prev/next   m: months   y: years   t: today   Enter: pick   e: mark"


class Orchestrator:
    """Owns the curses lifecycle and relays keys to the controller."""

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        selected: Optional[CalendarDate] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or load_config()
        self.state = AppState()
        self.controller = CalendarController(
            selected=selected,
            on_select=self._on_select,
            today=today,
        )
        self.state.cursor = self._view().reference_index()

    @property
    def selection(self) -> Optional[CalendarDate]:
        if not self.state.confirmed:
            return None
        return self.state.confirmed[-1]

    def _on_select(self, value: CalendarDate) -> None:
        self.state.confirmed.append(value)

    def _view(self) -> PickerView:
        return PickerView(self.controller.view_mode, self.controller.render_grid())

    def run(self) -> int:
        try:
            curses.wrapper(self._curses_main)
        except curses.error:
            return 1
        return 0

    def load(self) -> None:
        try:
            self.controller.set_events(load_events(self.config.events_path))
        except StorageError as exc:
            self._set_overlay(f"Storage error: {exc}")

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        stdscr.keypad(True)
        self.load()
        self._draw(stdscr)

        while True:
            ch = stdscr.getch()
            if ch in (-1, curses.ERR):
                continue
            if ch in (KEY_Q, KEY_CAP_Q) and self.state.overlay == "none":
                break
            if self.handle_key(ch):
                self._draw(stdscr)

    # Rendering
    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        draw_header(stdscr, f"dpick - {self.controller.header_label()}   [{self.controller.view_mode}]")
        draw_footer(stdscr, FOOTER)
        self._view().render(stdscr, self.state.cursor)

        if self.state.overlay == "help":
            draw_centered_box(stdscr, list(HELP_LINES) + ["", "Esc to dismiss"])
        elif self.state.overlay in ("error", "message"):
            draw_centered_box(stdscr, [self.state.overlay_message, "", "Press any key to dismiss"])
        stdscr.refresh()

    def _set_overlay(self, message: str, kind: str = "error") -> None:
        self.state.overlay = "error" if kind == "error" else "message"
        self.state.overlay_message = message

    # Key handling
    def handle_key(self, ch: int) -> bool:
        if self.state.overlay == "help":
            if ch in (KEY_ESC, KEY_HELP, KEY_Q, KEY_CAP_Q):
                self.state.overlay = "none"
                return True
            return False
        if self.state.overlay in ("error", "message"):
            self.state.overlay = "none"
            return True

        if ch == KEY_HELP:
            self.state.overlay = "help"
            return True
        if ch in (KEY_H, KEY_J, KEY_K, KEY_L):
            return self._move_cursor(ch)
        if ch in KEYS_ENTER:
            return self._activate()
        if ch == KEY_EVENT:
            return self._toggle_event()

        if ch == KEY_CAP_H:
            self.controller.navigate("backward")
        elif ch == KEY_CAP_L:
            self.controller.navigate("forward")
        elif ch == KEY_MONTHS:
            self.controller.toggle_month_view()
        elif ch == KEY_YEARS:
            self.controller.toggle_year_view()
        elif ch == KEY_TODAY:
            self.controller.jump_to_today()
        else:
            return False
        self.state.cursor = self._view().reference_index()
        return True

    def _move_cursor(self, ch: int) -> bool:
        deltas = {KEY_H: (-1, 0), KEY_L: (1, 0), KEY_J: (0, 1), KEY_K: (0, -1)}
        delta_cols, delta_rows = deltas[ch]
        self.state.cursor = self._view().move_cursor(self.state.cursor, delta_cols, delta_rows)
        return True

    def _activate(self) -> bool:
        view = self._view()
        cell = view.cells[self.state.cursor]
        if view.view == "days":
            self.controller.select_date(cell.date)
            return True
        if view.view == "months":
            self.controller.drill_into_month(cell.date.month)
        else:
            self.controller.drill_into_year(cell.date.year)
        self.state.cursor = self._view().reference_index()
        return True

    def _toggle_event(self) -> bool:
        view = self._view()
        if view.view != "days":
            return False
        day = view.cells[self.state.cursor].date
        try:
            events = toggle_event(self.config.events_path, self.controller.events, day)
        except StorageError as exc:
            self._set_overlay(f"Storage error: {exc}")
            return True
        self.controller.set_events(events)
        return True


__all__ = ["Orchestrator"]
