#!/usr/bin/env python3
"""State containers for dpick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from models import CalendarDate

ViewMode = Literal["days", "months", "years"]
VIEW_MODES: Tuple[ViewMode, ...] = ("days", "months", "years")

NavigationDirection = Literal["backward", "forward"]
DIRECTIONS: Tuple[NavigationDirection, ...] = ("backward", "forward")

OverlayKind = Literal["none", "help", "error", "message"]


@dataclass(frozen=True)
class ControllerState:
    """Snapshot of the picker after an operation.

    ``last_direction`` and ``is_drill_transition`` are hints for a
    presentation layer; date math never reads them.
    """

    reference_date: CalendarDate
    selected_date: Optional[CalendarDate] = None
    view_mode: ViewMode = "days"
    last_direction: NavigationDirection = "forward"
    is_drill_transition: bool = False


@dataclass
class AppState:
    overlay: OverlayKind = "none"
    overlay_message: str = ""
    cursor: int = 0
    confirmed: List[CalendarDate] = field(default_factory=list)


__all__ = [
    "AppState",
    "ControllerState",
    "DIRECTIONS",
    "NavigationDirection",
    "OverlayKind",
    "VIEW_MODES",
    "ViewMode",
]
