from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceMark, DayOff
from ..employees.model import Employee


@dataclass(frozen=True)
class DailyStats:
    """Attendance tallies for one date over the active roster."""

    date: str
    weekday: DayOff
    called: tuple[Employee, ...]
    off: tuple[Employee, ...]
    present: int
    late: int
    absent: int
    medical: int
    excused: int
    working_total: int
    attendance_rate: int
    absence_rate: int

    @property
    def called_total(self) -> int:
        return len(self.called)


@dataclass(frozen=True)
class CalendarDay:
    date: str
    day: int
    narrow_name: str
    weekday: DayOff


@dataclass(frozen=True)
class MonthlyRow:
    employee: Employee
    statuses: tuple[Optional[AttendanceMark], ...]


@dataclass(frozen=True)
class MonthlyCalendar:
    year_month: str
    days: tuple[CalendarDay, ...]
    rows: tuple[MonthlyRow, ...]


@dataclass(frozen=True)
class DayOffBucket:
    weekday: DayOff
    short_name: str
    count: int


@dataclass(frozen=True)
class StaffingBalance:
    balanced: bool
    recommendation: str
    busiest_day: DayOff
    lightest_day: DayOff
    average: float
