"""Help and cheatsheet content for the dpick TUI."""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "dpick help",
    "",
    "q            quit (prints the selected date)",
    "?            toggle this help",
    "hjkl         move cursor",
    "H / L        previous / next month, year or 12 years",
    "Enter        select day / open month / open year",
    "m            toggle month picker",
    "y            toggle year picker",
    "t            jump to today",
    "e            mark/unmark day under cursor",
    "Esc          dismiss overlays",
)

__all__ = ["HELP_LINES"]
