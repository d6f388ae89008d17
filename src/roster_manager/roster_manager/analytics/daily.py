from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import parse_iso_date, weekday_of
from ..common.numbers import percentage
from ..core.enums import AttendanceMark
from ..employees.model import Employee
from .model import DailyStats


def daily_stats(employees: Sequence[Employee], iso_date: str) -> DailyStats:
    """Split active employees into called/off for ``iso_date`` and tally the called ones.

    Late counts as present too. Medical and excused-no-record marks leave the
    working total, which is clamped at 0 before computing the rates.
    """
    weekday = weekday_of(parse_iso_date(iso_date))
    active = [e for e in employees if e.is_active]
    called = tuple(e for e in active if e.day_off != weekday)
    off = tuple(e for e in active if e.day_off == weekday)

    present = late = absent = medical = excused = 0
    for e in called:
        mark = e.mark_on(iso_date)
        if mark == AttendanceMark.PRESENT:
            present += 1
        elif mark == AttendanceMark.LATE:
            present += 1
            late += 1
        elif mark == AttendanceMark.ABSENT:
            absent += 1
        elif mark == AttendanceMark.MEDICAL:
            medical += 1
        elif mark == AttendanceMark.EXCUSED_NO_RECORD:
            excused += 1

    working_total = max(0, len(called) - (medical + excused))
    return DailyStats(
        date=iso_date,
        weekday=weekday,
        called=called,
        off=off,
        present=present,
        late=late,
        absent=absent,
        medical=medical,
        excused=excused,
        working_total=working_total,
        attendance_rate=percentage(present, working_total),
        absence_rate=percentage(absent, working_total),
    )


def pending_called(employees: Sequence[Employee], iso_date: str) -> tuple[Employee, ...]:
    """Called employees with no mark recorded yet for ``iso_date``."""
    return tuple(e for e in daily_stats(employees, iso_date).called if e.mark_on(iso_date) is None)


def pending_days_off(employees: Sequence[Employee], iso_date: str) -> tuple[Employee, ...]:
    return tuple(e for e in daily_stats(employees, iso_date).off if e.mark_on(iso_date) is None)
