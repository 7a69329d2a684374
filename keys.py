#!/usr/bin/env python3
"""Key constants and mappings."""
from __future__ import annotations

import curses

# Key constants
KEY_Q = ord("q")
KEY_CAP_Q = ord("Q")
KEY_HELP = ord("?")
KEY_TODAY = ord("t")
KEY_ESC = 27
KEY_EVENT = ord("e")
KEY_MONTHS = ord("m")
KEY_YEARS = ord("y")

KEY_H = ord("h")
KEY_J = ord("j")
KEY_K = ord("k")
KEY_L = ord("l")

KEY_CAP_H = ord("H")
KEY_CAP_L = ord("L")

KEYS_ENTER = (10, 13, curses.KEY_ENTER)


__all__ = [
    "KEY_Q",
    "KEY_CAP_Q",
    "KEY_HELP",
    "KEY_TODAY",
    "KEY_ESC",
    "KEY_EVENT",
    "KEY_MONTHS",
    "KEY_YEARS",
    "KEY_H",
    "KEY_J",
    "KEY_K",
    "KEY_L",
    "KEY_CAP_H",
    "KEY_CAP_L",
    "KEYS_ENTER",
]
