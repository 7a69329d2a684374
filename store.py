#!/usr/bin/env python3
"""PyArrow-backed storage for marked (event) dates."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import FrozenSet, Iterable, List

import pyarrow as pa
import pyarrow.parquet as pq

from models import CalendarDate


_SCHEMA = pa.schema([("date", pa.date32())])


class StorageError(Exception):
    pass


def _events_to_table(events: Iterable[CalendarDate]) -> pa.Table:
    return pa.Table.from_pydict(
        {"date": [ev.to_date() for ev in events]},
        schema=_SCHEMA,
    )


def _table_to_events(table: pa.Table) -> FrozenSet[CalendarDate]:
    # Validate schema shape explicitly
    if table.schema != _SCHEMA:
        raise StorageError("Parquet schema mismatch for events file")
    return frozenset(
        CalendarDate.from_date(value)
        for value in table.column("date").to_pylist()
        if value is not None
    )


def load_events(path: Path) -> FrozenSet[CalendarDate]:
    if not path.exists():
        return frozenset()
    try:
        table = pq.read_table(path)
        return _table_to_events(table)
    except StorageError:
        raise
    except Exception as exc:
        raise StorageError(f"Failed to read events from {path}: {exc}") from exc


def _write_atomic(path: Path, table: pa.Table) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(dir=str(path.parent), delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        pq.write_table(table, tmp_path)
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            try:
                os.remove(tmp_path)
            except OSError:
                pass


def save_events(path: Path, events: Iterable[CalendarDate]) -> None:
    ordered: List[CalendarDate] = sorted(set(events))
    try:
        _write_atomic(path, _events_to_table(ordered))
    except Exception as exc:
        raise StorageError(f"Failed to write events to {path}: {exc}") from exc


def toggle_event(
    path: Path, events: Iterable[CalendarDate], day: CalendarDate
) -> FrozenSet[CalendarDate]:
    """Mark ``day`` if it is unmarked, unmark it otherwise, and persist."""
    updated = set(events)
    if day in updated:
        updated.remove(day)
    else:
        updated.add(day)
    save_events(path, updated)
    return frozenset(updated)


__all__ = [
    "load_events",
    "save_events",
    "toggle_event",
    "StorageError",
]
