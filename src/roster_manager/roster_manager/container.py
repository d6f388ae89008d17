from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .analytics.service import AnalyticsService
from .assistant.client import AssistantClient, GeminiAssistantClient
from .assistant.service import AssistantService
from .employees.service import RosterService
from .persistence.gateway import Dispatcher, PersistenceGateway
from .persistence.local_repository import JsonFileSnapshotRepository
from .persistence.remote_client import RemoteSnapshotRepository
from .shift_logs.service import ShiftLogService
from .store.store import RecordStore
from .transfer.service import ExportService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    gateway: PersistenceGateway
    remote_timeout: float

    roster_service: RosterService
    shift_log_service: ShiftLogService
    analytics_service: AnalyticsService
    export_service: ExportService
    assistant_service: AssistantService


def build_remote(url: Optional[str], *, timeout: float) -> Optional[RemoteSnapshotRepository]:
    url = (url or "").strip()
    if not url:
        return None
    return RemoteSnapshotRepository(url, timeout=timeout)


def build_container(
    *,
    settings,
    dispatcher: Optional[Dispatcher] = None,
    assistant_client: Optional[AssistantClient] = None,
) -> Container:
    data_dir = Path(getattr(settings, "DATA_DIR", "data"))
    snapshot_file = str(getattr(settings, "SNAPSHOT_FILE", "roster.json"))
    remote_timeout = float(getattr(settings, "REMOTE_TIMEOUT", 10))

    local = JsonFileSnapshotRepository(data_dir / snapshot_file)
    remote = build_remote(getattr(settings, "REMOTE_SYNC_URL", ""), timeout=remote_timeout)
    gateway = PersistenceGateway(local, remote, dispatcher=dispatcher)

    store = RecordStore(gateway.load())
    store.subscribe(gateway.save)

    if assistant_client is None:
        assistant_client = GeminiAssistantClient(
            str(getattr(settings, "ASSISTANT_API_KEY", "")),
            model=str(getattr(settings, "ASSISTANT_MODEL", "gemini-2.5-flash")),
        )

    return Container(
        store=store,
        gateway=gateway,
        remote_timeout=remote_timeout,
        roster_service=RosterService(store),
        shift_log_service=ShiftLogService(store),
        analytics_service=AnalyticsService(store),
        export_service=ExportService(store),
        assistant_service=AssistantService(assistant_client, store),
    )
