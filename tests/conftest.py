from __future__ import annotations

import itertools
from types import SimpleNamespace

import pytest

from src.roster_manager.roster_manager.container import build_container
from src.roster_manager.roster_manager.core.enums import DayOff, ShiftType, WorkStatus
from src.roster_manager.roster_manager.employees.model import Employee
from src.roster_manager.roster_manager.persistence.gateway import inline_dispatcher
from src.roster_manager.roster_manager.store.model import RosterSnapshot
from src.roster_manager.roster_manager.store.store import RecordStore

MONDAY = "2024-01-01"
TUESDAY = "2024-01-02"


@pytest.fixture
def make_employee():
    counter = itertools.count(1)

    def _make(**overrides) -> Employee:
        n = next(counter)
        data = dict(
            employee_id=f"e{n}",
            legal_id=f"V-{1000 + n}",
            full_name=f"Employee {n}",
            entry_date="2023-03-15",
            shift=ShiftType.AM,
            day_off=DayOff.SUNDAY,
            job_title="Agent",
            email=f"employee{n}@example.com",
            supervisor="Maria",
            status=WorkStatus.ACTIVE,
        )
        data.update(overrides)
        return Employee(**data)

    return _make


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


class RecordingListener:
    def __init__(self):
        self.snapshots: list[RosterSnapshot] = []

    def __call__(self, snapshot: RosterSnapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def store(listener):
    s = RecordStore()
    s.subscribe(listener)
    return s


class FakeAssistantClient:
    def __init__(self, reply: str = "ok", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def generate(self, *, system, history, message):
        self.calls.append({"system": system, "history": list(history), "message": message})
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def settings(tmp_path):
    return SimpleNamespace(
        SECRET_KEY="test",
        DEBUG=False,
        LOG_LEVEL="WARNING",
        DATA_DIR=str(tmp_path),
        SNAPSHOT_FILE="roster.json",
        REMOTE_SYNC_URL="",
        REMOTE_TIMEOUT=1,
        ASSISTANT_API_KEY="",
        ASSISTANT_MODEL="test-model",
    )


@pytest.fixture
def container(settings):
    return build_container(settings=settings, dispatcher=inline_dispatcher, assistant_client=FakeAssistantClient())


@pytest.fixture
def client(container):
    from src.roster_manager.roster_manager.main import create_app

    app = create_app("config.testing", container=container)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def fake_client():
    return FakeAssistantClient
