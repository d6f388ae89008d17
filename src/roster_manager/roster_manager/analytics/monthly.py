from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import NARROW_WEEKDAY, days_in_month, parse_year_month, weekday_of
from ..core.constants import PATTERN_MAX_FLAGS, PATTERN_MIN_EMPLOYEE_ABSENCES, PATTERN_MIN_WEEKDAY_ABSENCES
from ..core.enums import AttendanceMark, DayOff
from ..employees.model import Employee
from .model import CalendarDay, MonthlyCalendar, MonthlyRow


def month_days(year_month: str) -> tuple[CalendarDay, ...]:
    year, month = parse_year_month(year_month)
    days = []
    for n in range(1, days_in_month(year, month) + 1):
        d = date(year, month, n)
        days.append(
            CalendarDay(
                date=d.isoformat(),
                day=n,
                narrow_name=NARROW_WEEKDAY[d.weekday()],
                weekday=weekday_of(d),
            )
        )
    return tuple(days)


def displayed_status(employee: Employee, day: CalendarDay) -> Optional[AttendanceMark]:
    """Explicit record wins; otherwise DayOff on the employee's day off; otherwise blank."""
    mark = employee.mark_on(day.date)
    if mark is not None:
        return mark
    if day.weekday == employee.day_off:
        return AttendanceMark.DAY_OFF
    return None


def monthly_calendar(employees: Sequence[Employee], year_month: str) -> MonthlyCalendar:
    days = month_days(year_month)
    rows = tuple(
        MonthlyRow(employee=e, statuses=tuple(displayed_status(e, d) for d in days))
        for e in employees
        if e.is_active
    )
    return MonthlyCalendar(year_month=year_month, days=days, rows=rows)


def detect_patterns(employees: Sequence[Employee], year_month: str) -> list[str]:
    """Advisory flags: employees with repeated absences, then the worst weekday."""
    days = month_days(year_month)
    flags: list[str] = []
    by_weekday: Counter = Counter()

    for e in employees:
        if not e.is_active:
            continue
        count = 0
        for d in days:
            if e.mark_on(d.date) == AttendanceMark.ABSENT:
                by_weekday[d.weekday] += 1
                count += 1
        if count >= PATTERN_MIN_EMPLOYEE_ABSENCES:
            flags.append(f"{e.full_name} has {count} absences in {year_month}.")

    if by_weekday:
        worst = max(DayOff, key=lambda w: by_weekday[w])
        if by_weekday[worst] > PATTERN_MIN_WEEKDAY_ABSENCES:
            flags.append(f"Trend: absences peak on {worst.value}.")

    return flags[:PATTERN_MAX_FLAGS]
