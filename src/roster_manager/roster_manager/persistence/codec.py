"""JSON-compatible encoding of RosterSnapshot.

Decoding is lenient about missing collections (older snapshots lack coaching
and status history) but strict about enum values.
"""

from __future__ import annotations

from typing import Any, Optional

from ..core.constants import DEFAULT_JOB_TITLE, DEFAULT_LOG_AUTHOR, MAX_SCORE, UNASSIGNED_SUPERVISOR
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
from ..core.exceptions import PersistenceError
from ..employees.model import CoachingEntry, Employee, Incident, StatusChange
from ..shift_logs.model import ShiftLogEntry
from ..store.model import RosterSnapshot


def employee_to_dict(e: Employee) -> dict[str, Any]:
    return {
        "id": e.employee_id,
        "legal_id": e.legal_id,
        "full_name": e.full_name,
        "job_title": e.job_title,
        "email": e.email,
        "entry_date": e.entry_date,
        "end_date": e.end_date,
        "shift": e.shift.value,
        "day_off": e.day_off.value,
        "supervisor": e.supervisor,
        "status": e.status.value,
        "status_history": [{"status": s.status.value, "date": s.date, "note": s.note} for s in e.status_history],
        "incidents": [
            {"id": i.incident_id, "date": i.date, "type": i.type.value, "note": i.note, "severity": i.severity.value}
            for i in e.incidents
        ],
        "coaching": [
            {
                "id": c.entry_id,
                "date": c.date,
                "topic": c.topic.value,
                "notes": c.notes,
                "action_items": c.action_items,
                "status": c.status.value,
            }
            for c in e.coaching
        ],
        "reliability_score": e.reliability_score,
        "attendance": {day: mark.value for day, mark in e.attendance.items()},
        "notes": e.notes,
    }


def employee_from_dict(d: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(d["id"]),
        legal_id=str(d.get("legal_id") or ""),
        full_name=str(d.get("full_name") or ""),
        job_title=d.get("job_title") or DEFAULT_JOB_TITLE,
        email=d.get("email") or "",
        entry_date=d.get("entry_date") or "",
        end_date=d.get("end_date") or None,
        shift=ShiftType(d.get("shift") or ShiftType.PM.value),
        day_off=DayOff(d.get("day_off") or DayOff.SUNDAY.value),
        supervisor=d.get("supervisor") or UNASSIGNED_SUPERVISOR,
        status=WorkStatus(d.get("status") or WorkStatus.ACTIVE.value),
        status_history=tuple(
            StatusChange(status=WorkStatus(s["status"]), date=s.get("date") or "", note=s.get("note") or "")
            for s in d.get("status_history") or []
        ),
        incidents=tuple(
            Incident(
                incident_id=str(i["id"]),
                date=i.get("date") or "",
                type=IncidentType(i["type"]),
                note=i.get("note") or "",
                severity=Severity(i.get("severity") or Severity.MEDIUM.value),
            )
            for i in d.get("incidents") or []
        ),
        coaching=tuple(
            CoachingEntry(
                entry_id=str(c["id"]),
                date=c.get("date") or "",
                topic=CoachingTopic(c["topic"]),
                notes=c.get("notes") or "",
                action_items=c.get("action_items") or "",
                status=CoachingStatus(c.get("status") or CoachingStatus.PENDING.value),
            )
            for c in d.get("coaching") or []
        ),
        reliability_score=int(d.get("reliability_score", MAX_SCORE)),
        attendance={day: AttendanceMark(mark) for day, mark in (d.get("attendance") or {}).items()},
        notes=d.get("notes"),
    )


def log_to_dict(entry: ShiftLogEntry) -> dict[str, Any]:
    return {"id": entry.entry_id, "timestamp": entry.timestamp, "text": entry.text, "author": entry.author}


def log_from_dict(d: dict[str, Any]) -> ShiftLogEntry:
    return ShiftLogEntry(
        entry_id=str(d["id"]),
        timestamp=d.get("timestamp") or "",
        text=d.get("text") or "",
        author=d.get("author") or DEFAULT_LOG_AUTHOR,
    )


def snapshot_to_dict(snapshot: RosterSnapshot, *, last_updated: Optional[str] = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "employees": [employee_to_dict(e) for e in snapshot.employees],
        "logs": [log_to_dict(entry) for entry in snapshot.logs],
    }
    if last_updated:
        payload["lastUpdated"] = last_updated
    return payload


def snapshot_from_dict(payload: Any) -> RosterSnapshot:
    if not isinstance(payload, dict):
        raise PersistenceError("Snapshot payload must be a JSON object")
    try:
        return RosterSnapshot(
            employees=tuple(employee_from_dict(d) for d in payload.get("employees") or []),
            logs=tuple(log_from_dict(d) for d in payload.get("logs") or []),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(f"Malformed snapshot: {e}") from e
