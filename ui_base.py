#!/usr/bin/env python3
"""Basic UI helpers for curses rendering."""

from __future__ import annotations

import curses
from typing import Iterable


def safe_addnstr(win: "curses.window", y: int, x: int, text: str, n: int, attr: int = 0) -> None:  # type: ignore[name-defined]
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w or n <= 0:
        return
    try:
        win.addnstr(y, x, text, min(n, w - x), attr)
    except curses.error:
        # writing the last cell of a window raises after drawing
        pass


def draw_header(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    _, w = stdscr.getmaxyx()
    safe_addnstr(stdscr, 0, 0, text.ljust(max(1, w - 1)), w - 1, curses.A_BOLD)


def draw_footer(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    safe_addnstr(stdscr, h - 1, 0, text.ljust(max(1, w - 1)), w - 1, curses.A_DIM)


def draw_centered_box(stdscr: "curses.window", lines: Iterable[str]) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    lines_list = list(lines) or [""]
    win_h = min(len(lines_list) + 2, h - 2)
    win_w = min(max(len(line) for line in lines_list) + 4, w - 2)
    if win_h < 3 or win_w < 5:
        return
    win = stdscr.derwin(win_h, win_w, (h - win_h) // 2, (w - win_w) // 2)
    win.erase()
    win.border()
    for idx, line in enumerate(lines_list[: win_h - 2], start=1):
        safe_addnstr(win, idx, 2, line, win_w - 4)
    win.refresh()


def clamp(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(value, max_value))


__all__ = ["draw_header", "draw_footer", "draw_centered_box", "clamp", "safe_addnstr"]
