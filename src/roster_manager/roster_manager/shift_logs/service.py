from __future__ import annotations

from typing import Callable

from ..common.datetime_utils import now_local
from ..common.identifiers import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_LOG_AUTHOR
from ..core.exceptions import NotFoundError
from ..store.store import RecordStore
from . import handlers
from .model import ShiftLogEntry


class ShiftLogService:
    def __init__(self, store: RecordStore, *, id_factory: Callable[[], str] = new_id):
        self._store = store
        self._new_id = id_factory

    def list_entries(self) -> tuple[ShiftLogEntry, ...]:
        return self._store.snapshot.logs

    def _require(self, entry_id: str) -> ShiftLogEntry:
        for entry in self._store.snapshot.logs:
            if entry.entry_id == entry_id:
                return entry
        raise NotFoundError("Log entry does not exist")

    def add(self, text: str, *, author: str = DEFAULT_LOG_AUTHOR) -> ShiftLogEntry:
        entry = ShiftLogEntry(
            entry_id=self._new_id(),
            timestamp=now_local().isoformat(timespec="seconds"),
            text=require_non_empty(text, "Log text"),
            author=optional_text(author, "Author") or DEFAULT_LOG_AUTHOR,
        )
        self._store.apply(lambda s: handlers.add_log(s, entry))
        return entry

    def edit(self, entry_id: str, text: str) -> ShiftLogEntry:
        self._require(entry_id)
        text = require_non_empty(text, "Log text")
        timestamp = now_local().isoformat(timespec="seconds")
        self._store.apply(lambda s: handlers.edit_log(s, entry_id, text=text, timestamp=timestamp))
        return self._require(entry_id)

    def delete(self, entry_id: str) -> None:
        self._require(entry_id)
        self._store.apply(lambda s: handlers.delete_log(s, entry_id))
