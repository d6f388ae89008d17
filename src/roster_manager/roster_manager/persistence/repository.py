from __future__ import annotations

from typing import Optional, Protocol

from ..store.model import RosterSnapshot


class SnapshotRepository(Protocol):
    """Storage backend for whole-roster snapshots.

    Implementations raise PersistenceError on I/O or decoding failures.
    """

    def load(self) -> Optional[RosterSnapshot]:
        """Return the stored snapshot, or None when nothing was stored yet."""

        raise NotImplementedError

    def save(self, snapshot: RosterSnapshot) -> None:
        raise NotImplementedError
