from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.constants import DEFAULT_JOB_TITLE, MAX_SCORE, UNASSIGNED_SUPERVISOR
from ..core.enums import (
    AttendanceMark,
    CoachingStatus,
    CoachingTopic,
    DayOff,
    IncidentType,
    Severity,
    ShiftType,
    WorkStatus,
)


@dataclass(frozen=True)
class Incident:
    incident_id: str
    date: str
    type: IncidentType
    note: str = ""
    severity: Severity = Severity.MEDIUM


@dataclass(frozen=True)
class CoachingEntry:
    """Feedback note logged by a supervisor."""

    entry_id: str
    date: str
    topic: CoachingTopic
    notes: str
    action_items: str = ""
    status: CoachingStatus = CoachingStatus.PENDING


@dataclass(frozen=True)
class StatusChange:
    status: WorkStatus
    date: str
    note: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object. ``attendance`` maps ISO date -> AttendanceMark and is
    never mutated in place; handlers build a new mapping and a new Employee.
    """

    employee_id: str
    legal_id: str
    full_name: str
    entry_date: str
    shift: ShiftType = ShiftType.PM
    day_off: DayOff = DayOff.SUNDAY
    job_title: str = DEFAULT_JOB_TITLE
    email: str = ""
    supervisor: str = UNASSIGNED_SUPERVISOR
    status: WorkStatus = WorkStatus.ACTIVE
    end_date: Optional[str] = None
    incidents: tuple[Incident, ...] = ()
    coaching: tuple[CoachingEntry, ...] = ()
    status_history: tuple[StatusChange, ...] = ()
    attendance: Mapping[str, AttendanceMark] = field(default_factory=dict)
    reliability_score: int = MAX_SCORE
    notes: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == WorkStatus.ACTIVE

    def mark_on(self, iso_date: str) -> Optional[AttendanceMark]:
        return self.attendance.get(iso_date)
