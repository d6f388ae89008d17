from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional

from ..core.exceptions import PersistenceError
from ..store.model import EMPTY_SNAPSHOT, RosterSnapshot
from .repository import SnapshotRepository

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None]], None]


class SerialDispatcher:
    """Runs remote pushes one at a time on a single daemon worker.

    At most one push waits behind the running one; a newer push replaces the
    waiting one, so the remote always ends on the latest snapshot.
    """

    def __init__(self, name: str = "roster-remote-sync"):
        self._name = name
        self._pending: queue.Queue = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._worker: Optional[threading.Thread] = None

    def __call__(self, job: Callable[[], None]) -> None:
        with self._lock:
            try:
                self._pending.get_nowait()
                logger.debug("superseded a pending remote push")
            except queue.Empty:
                pass
            self._pending.put_nowait(job)
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._run, name=self._name, daemon=True)
                self._worker.start()

    def _run(self) -> None:
        while True:
            job = self._pending.get()
            job()


def inline_dispatcher(job: Callable[[], None]) -> None:
    job()


class PersistenceGateway:
    """Load/save the roster: local snapshot first, remote sync best-effort.

    Nothing here raises to callers. Remote failures are logged and dropped;
    there is no retry. Without a dispatcher each gateway gets its own
    SerialDispatcher.
    """

    def __init__(
        self,
        local: SnapshotRepository,
        remote: Optional[SnapshotRepository] = None,
        *,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self._local = local
        self._remote = remote
        self._dispatch = dispatcher or SerialDispatcher()

    @property
    def remote(self) -> Optional[SnapshotRepository]:
        return self._remote

    def set_remote(self, remote: Optional[SnapshotRepository]) -> None:
        self._remote = remote

    def load(self) -> RosterSnapshot:
        if self._remote is not None:
            try:
                snapshot = self._remote.load()
                if snapshot is not None and (snapshot.employees or snapshot.logs):
                    return snapshot
                logger.info("remote snapshot is empty, using local snapshot")
            except PersistenceError as e:
                logger.warning("remote load failed, using local snapshot: %s", e)

        try:
            snapshot = self._local.load()
        except PersistenceError as e:
            logger.warning("local snapshot unreadable, starting empty: %s", e)
            return EMPTY_SNAPSHOT
        return snapshot if snapshot is not None else EMPTY_SNAPSHOT

    def save(self, snapshot: RosterSnapshot) -> None:
        try:
            self._local.save(snapshot)
        except PersistenceError:
            logger.exception("local snapshot write failed")

        remote = self._remote
        if remote is None:
            return

        def push() -> None:
            try:
                remote.save(snapshot)
            except PersistenceError as e:
                logger.warning("remote sync dropped: %s", e)

        self._dispatch(push)
