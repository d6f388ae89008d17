"""Mutation handlers: pure ``(snapshot, payload) -> snapshot`` transforms.

Handlers never raise for well-typed input. An unknown employee id leaves the
snapshot unchanged; validation happens in the service layer beforehand.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import parse_iso_date, weekday_of
from ..core.enums import AttendanceMark, CoachingStatus, WorkStatus
from ..store.model import RosterSnapshot
from .model import CoachingEntry, Employee, Incident, StatusChange
from .scoring import reliability_score


def _update_one(
    snapshot: RosterSnapshot,
    employee_id: str,
    fn: Callable[[Employee], Employee],
) -> RosterSnapshot:
    employees = tuple(fn(e) if e.employee_id == employee_id else e for e in snapshot.employees)
    return replace(snapshot, employees=employees)


def _with_mark(employee: Employee, iso_date: str, mark: AttendanceMark) -> Employee:
    attendance = dict(employee.attendance)
    attendance[iso_date] = mark
    return replace(employee, attendance=attendance)


def register_employee(snapshot: RosterSnapshot, employee: Employee) -> RosterSnapshot:
    return replace(snapshot, employees=snapshot.employees + (employee,))


def import_employees(snapshot: RosterSnapshot, employees: Iterable[Employee]) -> RosterSnapshot:
    return replace(snapshot, employees=snapshot.employees + tuple(employees))


def update_employee(snapshot: RosterSnapshot, employee_id: str, **fields) -> RosterSnapshot:
    """Replace descriptive/scheduling fields; logs and scores are left untouched."""
    return _update_one(snapshot, employee_id, lambda e: replace(e, **fields))


def delete_employee(snapshot: RosterSnapshot, employee_id: str) -> RosterSnapshot:
    return replace(snapshot, employees=tuple(e for e in snapshot.employees if e.employee_id != employee_id))


def clear_roster(snapshot: RosterSnapshot) -> RosterSnapshot:
    return replace(snapshot, employees=())


def mark_attendance(
    snapshot: RosterSnapshot,
    employee_id: str,
    iso_date: str,
    mark: AttendanceMark,
) -> RosterSnapshot:
    """Set one attendance entry, overwriting any previous mark for that date."""
    return _update_one(snapshot, employee_id, lambda e: _with_mark(e, iso_date, mark))


def mark_all_present(snapshot: RosterSnapshot, iso_date: str) -> RosterSnapshot:
    """Mark every called employee without a record for ``iso_date`` as present."""
    weekday = weekday_of(parse_iso_date(iso_date))

    def fn(e: Employee) -> Employee:
        if e.is_active and e.day_off != weekday and iso_date not in e.attendance:
            return _with_mark(e, iso_date, AttendanceMark.PRESENT)
        return e

    return replace(snapshot, employees=tuple(fn(e) for e in snapshot.employees))


def autofill_days_off(snapshot: RosterSnapshot, iso_date: str) -> RosterSnapshot:
    """Record DayOff for active employees scheduled off that weekday with no record yet."""
    weekday = weekday_of(parse_iso_date(iso_date))

    def fn(e: Employee) -> Employee:
        if e.is_active and e.day_off == weekday and iso_date not in e.attendance:
            return _with_mark(e, iso_date, AttendanceMark.DAY_OFF)
        return e

    return replace(snapshot, employees=tuple(fn(e) for e in snapshot.employees))


def add_incident(snapshot: RosterSnapshot, employee_id: str, incident: Incident) -> RosterSnapshot:
    def fn(e: Employee) -> Employee:
        incidents = e.incidents + (incident,)
        return replace(e, incidents=incidents, reliability_score=reliability_score(incidents))

    return _update_one(snapshot, employee_id, fn)


def add_coaching(snapshot: RosterSnapshot, employee_id: str, entry: CoachingEntry) -> RosterSnapshot:
    return _update_one(snapshot, employee_id, lambda e: replace(e, coaching=(entry,) + e.coaching))


def complete_coaching(snapshot: RosterSnapshot, employee_id: str, entry_id: str) -> RosterSnapshot:
    def fn(e: Employee) -> Employee:
        coaching = tuple(
            replace(c, status=CoachingStatus.COMPLETED) if c.entry_id == entry_id else c for c in e.coaching
        )
        return replace(e, coaching=coaching)

    return _update_one(snapshot, employee_id, fn)


def change_status(
    snapshot: RosterSnapshot,
    employee_id: str,
    status: WorkStatus,
    effective_date: str,
    note: Optional[str] = None,
) -> RosterSnapshot:
    """Set the work status; the end date is stamped only on Exit and cleared otherwise."""

    def fn(e: Employee) -> Employee:
        change = StatusChange(status=status, date=effective_date, note=note or "")
        return replace(
            e,
            status=status,
            end_date=effective_date if status == WorkStatus.EXIT else None,
            status_history=e.status_history + (change,),
        )

    return _update_one(snapshot, employee_id, fn)
