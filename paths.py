#!/usr/bin/env python3
"""XDG path helpers for dpick."""

from __future__ import annotations

import os
from pathlib import Path


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()


def xdg_data_home() -> Path:
    xdg_data_env = os.environ.get("XDG_DATA_HOME")
    if xdg_data_env:
        return Path(xdg_data_env).expanduser() / "dpick"
    return Path("~/.dpick").expanduser()


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


__all__ = ["xdg_config_home", "xdg_data_home", "ensure_dir"]
