from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import PersistenceError
from ..store.model import RosterSnapshot
from .codec import snapshot_from_dict, snapshot_to_dict
from .repository import SnapshotRepository


class JsonFileSnapshotRepository(SnapshotRepository):
    """Local snapshot kept as one JSON file; the durable record of the roster."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[RosterSnapshot]:
        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Cannot read {self._path}: {e}") from e
        return snapshot_from_dict(payload)

    def save(self, snapshot: RosterSnapshot) -> None:
        payload = snapshot_to_dict(snapshot, last_updated=now_local().isoformat())
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self._path}: {e}") from e
