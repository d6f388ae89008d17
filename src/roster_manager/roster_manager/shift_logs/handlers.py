from __future__ import annotations

from dataclasses import replace

from ..store.model import RosterSnapshot
from .model import ShiftLogEntry


def add_log(snapshot: RosterSnapshot, entry: ShiftLogEntry) -> RosterSnapshot:
    return replace(snapshot, logs=(entry,) + snapshot.logs)


def edit_log(snapshot: RosterSnapshot, entry_id: str, *, text: str, timestamp: str) -> RosterSnapshot:
    """Replace text and timestamp in place, keeping the entry's position."""
    logs = tuple(
        replace(entry, text=text, timestamp=timestamp) if entry.entry_id == entry_id else entry
        for entry in snapshot.logs
    )
    return replace(snapshot, logs=logs)


def delete_log(snapshot: RosterSnapshot, entry_id: str) -> RosterSnapshot:
    return replace(snapshot, logs=tuple(entry for entry in snapshot.logs if entry.entry_id != entry_id))
