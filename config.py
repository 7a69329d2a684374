#!/usr/bin/env python3
"""Configuration loading and path resolution for dpick."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from paths import ensure_dir, xdg_config_home, xdg_data_home


@dataclass
class Config:
    events_path: Path


DEFAULT_EVENTS_FILENAME = "events.parquet"
CONFIG_FILENAME = "config.json"


def config_path() -> Path:
    return (xdg_config_home() / "dpick" / CONFIG_FILENAME).expanduser()


def load_config(events_override: Optional[str] = None) -> Config:
    """Load config from XDG path, falling back to defaults.

    Invalid JSON or a missing file fall back to defaults. ``events_override``
    (the ``-e`` flag) wins over the file.
    """

    path = config_path()
    raw: Dict[str, Any] = {}

    if path.exists():
        raw_text = path.read_text()
        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError:
            try:
                raw = json.loads(_strip_trailing_commas(raw_text))
            except json.JSONDecodeError:
                raw = {}
    if not isinstance(raw, dict):
        raw = {}

    events_value = events_override or raw.get("events_path")
    if events_value:
        events_path = Path(str(events_value)).expanduser()
    else:
        events_path = xdg_data_home() / DEFAULT_EVENTS_FILENAME

    ensure_dir(events_path.parent)

    return Config(events_path=events_path)


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "config_path", "CONFIG_FILENAME"]
