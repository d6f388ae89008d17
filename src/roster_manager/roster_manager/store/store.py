from __future__ import annotations

import logging
import threading
from typing import Callable

from .model import EMPTY_SNAPSHOT, RosterSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[RosterSnapshot], None]


class RecordStore:
    """Owns the current RosterSnapshot.

    Snapshots are immutable; every mutation replaces the current one wholesale and
    notifies subscribers (the persistence write-through is one of them).
    Mutations are serialized: transform, swap and notification run under one lock.
    """

    def __init__(self, initial: RosterSnapshot = EMPTY_SNAPSHOT):
        self._current = initial
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def snapshot(self) -> RosterSnapshot:
        return self._current

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def replace(self, snapshot: RosterSnapshot) -> RosterSnapshot:
        with self._lock:
            self._current = snapshot
            logger.debug("roster replaced: employees=%d logs=%d", len(snapshot.employees), len(snapshot.logs))
            for listener in self._listeners:
                listener(snapshot)
            return snapshot

    def apply(self, transform: Callable[[RosterSnapshot], RosterSnapshot]) -> RosterSnapshot:
        with self._lock:
            return self.replace(transform(self._current))
