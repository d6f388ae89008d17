from __future__ import annotations

import logging
from typing import Callable, Optional

from ..analytics.daily import pending_called, pending_days_off
from ..analytics.duplicates import legal_id_counts
from ..common.datetime_utils import today_iso
from ..common.identifiers import new_id
from ..common.validators import optional_iso_date, optional_text, require_enum, require_iso_date, require_non_empty
from ..core.constants import DEFAULT_JOB_TITLE, UNASSIGNED_SUPERVISOR
from ..core.enums import AttendanceMark, CoachingTopic, DayOff, IncidentType, Severity, ShiftType, WorkStatus
from ..core.exceptions import DuplicateWarning, NotFoundError, ValidationError
from ..store.store import RecordStore
from ..transfer.csv_import import parse_roster
from . import handlers
from .model import CoachingEntry, Employee, Incident

logger = logging.getLogger(__name__)


class RosterService:
    """Use cases that change the roster.

    Input is validated here; the pure handlers then produce the next snapshot and
    the store writes it through to persistence.
    """

    def __init__(self, store: RecordStore, *, id_factory: Callable[[], str] = new_id):
        self._store = store
        self._new_id = id_factory

    def get(self, employee_id: str) -> Employee:
        employee = self._store.snapshot.find_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee does not exist")
        return employee

    def list_all(self) -> tuple[Employee, ...]:
        return self._store.snapshot.employees

    def register(
        self,
        *,
        full_name: str,
        legal_id: str,
        entry_date: str,
        shift: str | ShiftType = ShiftType.PM,
        day_off: str | DayOff = DayOff.SUNDAY,
        email: str = "",
        job_title: str = "",
        supervisor: str = "",
        confirm_duplicate: bool = False,
    ) -> Employee:
        full_name = require_non_empty(full_name, "Name")
        legal_id = require_non_empty(legal_id, "Legal id")
        entry_date = require_iso_date(entry_date, "Entry date")
        shift = require_enum(ShiftType, shift, "Shift")
        day_off = require_enum(DayOff, day_off, "Day off")

        count = legal_id_counts(self._store.snapshot.employees)[legal_id]
        if count and not confirm_duplicate:
            raise DuplicateWarning(legal_id, count)

        employee = Employee(
            employee_id=self._new_id(),
            legal_id=legal_id,
            full_name=full_name,
            entry_date=entry_date,
            shift=shift,
            day_off=day_off,
            email=optional_text(email, "Email"),
            job_title=optional_text(job_title, "Job title") or DEFAULT_JOB_TITLE,
            supervisor=optional_text(supervisor, "Supervisor") or UNASSIGNED_SUPERVISOR,
        )
        self._store.apply(lambda s: handlers.register_employee(s, employee))
        logger.info("registered employee %s", employee.employee_id)
        return employee

    def update(
        self,
        employee_id: str,
        *,
        full_name: str,
        legal_id: str,
        entry_date: str,
        shift: str | ShiftType,
        day_off: str | DayOff,
        email: str = "",
        job_title: str = "",
        supervisor: str = "",
        end_date: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Employee:
        self.get(employee_id)
        fields = {
            "full_name": require_non_empty(full_name, "Name"),
            "legal_id": require_non_empty(legal_id, "Legal id"),
            "entry_date": require_iso_date(entry_date, "Entry date"),
            "shift": require_enum(ShiftType, shift, "Shift"),
            "day_off": require_enum(DayOff, day_off, "Day off"),
            "email": optional_text(email, "Email"),
            "job_title": optional_text(job_title, "Job title"),
            "supervisor": optional_text(supervisor, "Supervisor"),
            "end_date": optional_iso_date(end_date, "End date"),
            "notes": optional_text(notes, "Notes") or None,
        }
        self._store.apply(lambda s: handlers.update_employee(s, employee_id, **fields))
        return self.get(employee_id)

    def delete(self, employee_id: str, *, confirm: bool = False) -> None:
        if not confirm:
            raise ValidationError("Deleting an employee must be confirmed")
        self.get(employee_id)
        self._store.apply(lambda s: handlers.delete_employee(s, employee_id))
        logger.info("deleted employee %s", employee_id)

    def clear_all(self, *, confirm: bool = False) -> int:
        if not confirm:
            raise ValidationError("Clearing the roster must be confirmed")
        removed = len(self._store.snapshot.employees)
        self._store.apply(handlers.clear_roster)
        logger.info("cleared roster (%d employees)", removed)
        return removed

    def mark_attendance(self, employee_id: str, *, work_date: str, mark: str | AttendanceMark) -> Employee:
        work_date = require_iso_date(work_date, "Date")
        mark = require_enum(AttendanceMark, mark, "Attendance")
        self.get(employee_id)
        self._store.apply(lambda s: handlers.mark_attendance(s, employee_id, work_date, mark))
        return self.get(employee_id)

    def mark_all_present(self, *, work_date: str) -> int:
        """Mark every called employee still unmarked on ``work_date`` as present."""
        work_date = require_iso_date(work_date, "Date")
        targets = pending_called(self._store.snapshot.employees, work_date)
        if targets:
            self._store.apply(lambda s: handlers.mark_all_present(s, work_date))
        return len(targets)

    def autofill_days_off(self, *, work_date: str) -> int:
        work_date = require_iso_date(work_date, "Date")
        targets = pending_days_off(self._store.snapshot.employees, work_date)
        if targets:
            self._store.apply(lambda s: handlers.autofill_days_off(s, work_date))
        return len(targets)

    def add_incident(
        self,
        employee_id: str,
        *,
        incident_type: str | IncidentType,
        incident_date: Optional[str] = None,
        note: str = "",
        severity: str | Severity = Severity.MEDIUM,
    ) -> Employee:
        self.get(employee_id)
        incident = Incident(
            incident_id=self._new_id(),
            date=require_iso_date(incident_date or today_iso(), "Date"),
            type=require_enum(IncidentType, incident_type, "Incident type"),
            note=optional_text(note, "Note"),
            severity=require_enum(Severity, severity, "Severity"),
        )
        self._store.apply(lambda s: handlers.add_incident(s, employee_id, incident))
        return self.get(employee_id)

    def add_coaching(
        self,
        employee_id: str,
        *,
        notes: str,
        topic: str | CoachingTopic = CoachingTopic.PERFORMANCE,
        entry_date: Optional[str] = None,
        action_items: str = "",
    ) -> Employee:
        self.get(employee_id)
        entry = CoachingEntry(
            entry_id=self._new_id(),
            date=require_iso_date(entry_date or today_iso(), "Date"),
            topic=require_enum(CoachingTopic, topic, "Topic"),
            notes=require_non_empty(notes, "Notes"),
            action_items=optional_text(action_items, "Action items"),
        )
        self._store.apply(lambda s: handlers.add_coaching(s, employee_id, entry))
        return self.get(employee_id)

    def complete_coaching(self, employee_id: str, entry_id: str) -> Employee:
        employee = self.get(employee_id)
        if not any(c.entry_id == entry_id for c in employee.coaching):
            raise NotFoundError("Coaching entry does not exist")
        self._store.apply(lambda s: handlers.complete_coaching(s, employee_id, entry_id))
        return self.get(employee_id)

    def change_status(
        self,
        employee_id: str,
        *,
        status: str | WorkStatus,
        effective_date: Optional[str] = None,
        note: Optional[str] = None,
    ) -> Employee:
        status = require_enum(WorkStatus, status, "Status")
        effective_date = require_iso_date(effective_date or today_iso(), "Date")
        self.get(employee_id)
        self._store.apply(lambda s: handlers.change_status(s, employee_id, status, effective_date, note))
        logger.info("employee %s status -> %s", employee_id, status.value)
        return self.get(employee_id)

    def import_rows(self, text: str) -> list[Employee]:
        employees = parse_roster(text or "", id_factory=self._new_id)
        if employees:
            self._store.apply(lambda s: handlers.import_employees(s, employees))
        return employees
