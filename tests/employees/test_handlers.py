from __future__ import annotations

from src.roster_manager.roster_manager.core.enums import (
    AttendanceMark,
    CoachingStatus,
    CoachingTopic,
    DayOff,
    IncidentType,
    WorkStatus,
)
from src.roster_manager.roster_manager.employees import handlers
from src.roster_manager.roster_manager.employees.model import CoachingEntry, Incident
from src.roster_manager.roster_manager.store.model import RosterSnapshot

MONDAY = "2024-01-01"


def test_mark_attendance_overwrites_previous_mark(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    snap = handlers.mark_attendance(snap, "a", MONDAY, AttendanceMark.ABSENT)
    snap = handlers.mark_attendance(snap, "a", MONDAY, AttendanceMark.PRESENT)

    assert snap.find_employee("a").attendance == {MONDAY: AttendanceMark.PRESENT}


def test_handlers_do_not_mutate_previous_snapshot(make_employee):
    before = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    after = handlers.mark_attendance(before, "a", MONDAY, AttendanceMark.LATE)

    assert before.find_employee("a").attendance == {}
    assert after.find_employee("a").attendance == {MONDAY: AttendanceMark.LATE}


def test_unknown_employee_leaves_snapshot_unchanged(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    assert handlers.mark_attendance(snap, "missing", MONDAY, AttendanceMark.ABSENT) == snap


def test_change_status_exit_stamps_end_date(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    snap = handlers.change_status(snap, "a", WorkStatus.EXIT, "2024-02-01", "resigned")

    employee = snap.find_employee("a")
    assert employee.status == WorkStatus.EXIT
    assert employee.end_date == "2024-02-01"
    assert employee.status_history[-1].note == "resigned"


def test_change_status_other_than_exit_clears_end_date(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a", status=WorkStatus.EXIT, end_date="2024-02-01"),))
    snap = handlers.change_status(snap, "a", WorkStatus.ACTIVE, "2024-03-01")

    assert snap.find_employee("a").end_date is None


def test_add_incident_recomputes_score(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    snap = handlers.add_incident(snap, "a", Incident("i1", MONDAY, IncidentType.ABSENCE))
    snap = handlers.add_incident(snap, "a", Incident("i2", MONDAY, IncidentType.CONDUCT))

    employee = snap.find_employee("a")
    assert len(employee.incidents) == 2
    assert employee.reliability_score == 65


def test_add_and_complete_coaching(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"),))
    first = CoachingEntry("c1", MONDAY, CoachingTopic.ATTENDANCE, "talked")
    second = CoachingEntry("c2", MONDAY, CoachingTopic.ONE_ON_ONE, "follow-up")
    snap = handlers.add_coaching(snap, "a", first)
    snap = handlers.add_coaching(snap, "a", second)
    snap = handlers.complete_coaching(snap, "a", "c1")

    coaching = snap.find_employee("a").coaching
    assert [c.entry_id for c in coaching] == ["c2", "c1"]
    assert coaching[1].status == CoachingStatus.COMPLETED
    assert coaching[0].status == CoachingStatus.PENDING


def test_mark_all_present_only_touches_unmarked_called(make_employee):
    snap = RosterSnapshot(
        employees=(
            make_employee(employee_id="off", day_off=DayOff.MONDAY),
            make_employee(employee_id="late", attendance={MONDAY: AttendanceMark.LATE}),
            make_employee(employee_id="blank"),
            make_employee(employee_id="gone", status=WorkStatus.EXIT),
        )
    )
    snap = handlers.mark_all_present(snap, MONDAY)

    assert snap.find_employee("off").mark_on(MONDAY) is None
    assert snap.find_employee("late").mark_on(MONDAY) == AttendanceMark.LATE
    assert snap.find_employee("blank").mark_on(MONDAY) == AttendanceMark.PRESENT
    assert snap.find_employee("gone").mark_on(MONDAY) is None


def test_autofill_days_off(make_employee):
    snap = RosterSnapshot(
        employees=(
            make_employee(employee_id="off", day_off=DayOff.MONDAY),
            make_employee(employee_id="worked", day_off=DayOff.MONDAY, attendance={MONDAY: AttendanceMark.PRESENT}),
            make_employee(employee_id="called"),
        )
    )
    snap = handlers.autofill_days_off(snap, MONDAY)

    assert snap.find_employee("off").mark_on(MONDAY) == AttendanceMark.DAY_OFF
    assert snap.find_employee("worked").mark_on(MONDAY) == AttendanceMark.PRESENT
    assert snap.find_employee("called").mark_on(MONDAY) is None


def test_delete_and_clear(make_employee):
    snap = RosterSnapshot(employees=(make_employee(employee_id="a"), make_employee(employee_id="b")))
    snap = handlers.delete_employee(snap, "a")
    assert [e.employee_id for e in snap.employees] == ["b"]
    assert handlers.clear_roster(snap).employees == ()
