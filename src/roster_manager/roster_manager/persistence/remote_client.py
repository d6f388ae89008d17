from __future__ import annotations

from typing import Optional

import requests

from ..common.datetime_utils import now_local
from ..core.exceptions import PersistenceError
from ..store.model import RosterSnapshot
from .codec import snapshot_from_dict, snapshot_to_dict
from .repository import SnapshotRepository


class RemoteSnapshotRepository(SnapshotRepository):
    """Spreadsheet-backed web endpoint: GET returns the snapshot, POST replaces it.

    The endpoint's response to a POST is ignored.
    """

    def __init__(self, url: str, *, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self._url

    def load(self) -> Optional[RosterSnapshot]:
        try:
            resp = self._session.get(self._url, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise PersistenceError(f"Remote load failed: {e}") from e
        return snapshot_from_dict(payload)

    def save(self, snapshot: RosterSnapshot) -> None:
        payload = snapshot_to_dict(snapshot, last_updated=now_local().isoformat())
        try:
            self._session.post(self._url, json=payload, timeout=self._timeout)
        except requests.RequestException as e:
            raise PersistenceError(f"Remote save failed: {e}") from e
