from __future__ import annotations

import json
import threading

import pytest

from src.roster_manager.roster_manager.core.enums import AttendanceMark, IncidentType
from src.roster_manager.roster_manager.core.exceptions import PersistenceError
from src.roster_manager.roster_manager.employees.model import Incident
from src.roster_manager.roster_manager.employees.service import RosterService
from src.roster_manager.roster_manager.persistence.codec import snapshot_from_dict
from src.roster_manager.roster_manager.persistence.gateway import PersistenceGateway, SerialDispatcher, inline_dispatcher
from src.roster_manager.roster_manager.persistence.local_repository import JsonFileSnapshotRepository
from src.roster_manager.roster_manager.shift_logs.model import ShiftLogEntry
from src.roster_manager.roster_manager.store.model import EMPTY_SNAPSHOT, RosterSnapshot
from src.roster_manager.roster_manager.store.store import RecordStore


class InMemoryRepository:
    def __init__(self, snapshot=None, *, fail=False, events=None, name="memory"):
        self.snapshot = snapshot
        self.fail = fail
        self.events = events if events is not None else []
        self.name = name
        self.saved: list[RosterSnapshot] = []

    def load(self):
        if self.fail:
            raise PersistenceError(f"{self.name} unavailable")
        return self.snapshot

    def save(self, snapshot):
        self.events.append(self.name)
        if self.fail:
            raise PersistenceError(f"{self.name} unavailable")
        self.saved.append(snapshot)
        self.snapshot = snapshot


@pytest.fixture
def snapshot(make_employee):
    ana = make_employee(
        full_name="Ana",
        attendance={"2024-01-01": AttendanceMark.ABSENT},
        incidents=(Incident(incident_id="i1", date="2024-01-01", type=IncidentType.ABSENCE, note="no call"),),
        reliability_score=85,
    )
    log = ShiftLogEntry(entry_id="l1", timestamp="2024-01-01T08:00:00", text="Opened")
    return RosterSnapshot(employees=(ana,), logs=(log,))


def test_local_file_round_trip(tmp_path, snapshot):
    repo = JsonFileSnapshotRepository(tmp_path / "nested" / "roster.json")

    assert repo.load() is None
    repo.save(snapshot)

    assert repo.load() == snapshot
    payload = json.loads(repo.path.read_text(encoding="utf-8"))
    assert set(payload) == {"employees", "logs", "lastUpdated"}
    assert payload["employees"][0]["id"] == "e1"


def test_corrupt_local_file_raises(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFileSnapshotRepository(path).load()


def test_load_prefers_remote(snapshot):
    gateway = PersistenceGateway(InMemoryRepository(EMPTY_SNAPSHOT), InMemoryRepository(snapshot), dispatcher=inline_dispatcher)
    assert gateway.load() == snapshot


def test_load_falls_back_to_local_when_remote_fails(snapshot):
    gateway = PersistenceGateway(InMemoryRepository(snapshot), InMemoryRepository(fail=True), dispatcher=inline_dispatcher)
    assert gateway.load() == snapshot


@pytest.mark.parametrize("payload", [{}, {"employees": []}, {"error": "sheet not found"}])
def test_empty_remote_does_not_replace_local(snapshot, payload):
    remote = InMemoryRepository(snapshot_from_dict(payload))
    gateway = PersistenceGateway(InMemoryRepository(snapshot), remote, dispatcher=inline_dispatcher)

    assert gateway.load() == snapshot


def test_local_roster_survives_empty_remote_after_mutation(tmp_path, make_employee):
    local = JsonFileSnapshotRepository(tmp_path / "roster.json")
    local.save(RosterSnapshot(employees=(make_employee(), make_employee())))
    gateway = PersistenceGateway(local, InMemoryRepository(snapshot_from_dict({})), dispatcher=inline_dispatcher)

    store = RecordStore(gateway.load())
    store.subscribe(gateway.save)
    RosterService(store).register(full_name="Eva", legal_id="V-9", entry_date="2024-01-10")

    assert len(local.load().employees) == 3


def test_load_is_empty_when_nothing_is_stored():
    gateway = PersistenceGateway(InMemoryRepository(None), dispatcher=inline_dispatcher)
    assert gateway.load() == EMPTY_SNAPSHOT


def test_save_writes_local_before_remote(snapshot):
    events: list[str] = []
    local = InMemoryRepository(events=events, name="local")
    remote = InMemoryRepository(events=events, name="remote")
    gateway = PersistenceGateway(local, remote, dispatcher=inline_dispatcher)

    gateway.save(snapshot)

    assert events == ["local", "remote"]
    assert local.saved == [snapshot]
    assert remote.saved == [snapshot]


def test_remote_failure_never_reaches_caller(snapshot):
    local = InMemoryRepository()
    gateway = PersistenceGateway(local, InMemoryRepository(fail=True), dispatcher=inline_dispatcher)

    gateway.save(snapshot)

    assert local.saved == [snapshot]


def test_local_failure_still_pushes_remote(snapshot):
    remote = InMemoryRepository()
    gateway = PersistenceGateway(InMemoryRepository(fail=True), remote, dispatcher=inline_dispatcher)

    gateway.save(snapshot)

    assert remote.saved == [snapshot]


def test_dispatcher_receives_remote_push(snapshot):
    jobs = []
    remote = InMemoryRepository()
    gateway = PersistenceGateway(InMemoryRepository(), remote, dispatcher=jobs.append)

    gateway.save(snapshot)
    assert remote.saved == []

    jobs[0]()
    assert remote.saved == [snapshot]


def test_serial_dispatcher_keeps_only_latest_pending_push():
    started, release, finished = threading.Event(), threading.Event(), threading.Event()
    ran: list[int] = []

    def first():
        started.set()
        release.wait(2)
        ran.append(1)

    def last():
        ran.append(3)
        finished.set()

    dispatcher = SerialDispatcher()
    dispatcher(first)
    assert started.wait(2)
    dispatcher(lambda: ran.append(2))
    dispatcher(last)
    release.set()

    assert finished.wait(2)
    assert ran == [1, 3]


def test_serial_dispatcher_runs_pushes_in_order():
    first_done, second_done = threading.Event(), threading.Event()
    ran: list[int] = []
    dispatcher = SerialDispatcher()

    dispatcher(lambda: (ran.append(1), first_done.set()))
    assert first_done.wait(2)
    dispatcher(lambda: (ran.append(2), second_done.set()))

    assert second_done.wait(2)
    assert ran == [1, 2]


def test_codec_tolerates_missing_collections():
    snapshot = snapshot_from_dict({"employees": [{"id": "x", "full_name": "Ana", "legal_id": "V-1"}]})

    ana = snapshot.employees[0]
    assert snapshot.logs == ()
    assert ana.incidents == ()
    assert ana.coaching == ()
    assert dict(ana.attendance) == {}
    assert ana.reliability_score == 100
    assert ana.supervisor == "Unassigned"


def test_codec_rejects_unknown_enum_values():
    with pytest.raises(PersistenceError):
        snapshot_from_dict({"employees": [{"id": "x", "status": "Retired"}]})
    with pytest.raises(PersistenceError):
        snapshot_from_dict(["not", "a", "dict"])
