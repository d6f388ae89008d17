from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import WorkStatus
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.scoring import data_quality_score, is_at_risk, profile_score, seniority_label
from ..store.store import RecordStore
from . import reports
from .daily import daily_stats
from .duplicates import is_legal_id_duplicate, is_supervisor_slot_duplicate, legal_id_counts, supervisor_slot_counts
from .model import DailyStats, MonthlyCalendar, StaffingBalance
from .monthly import detect_patterns, monthly_calendar
from .staffing import day_off_distribution, staffing_balance
from .views import filter_directory, month_progress, upcoming_anniversaries


@dataclass(frozen=True)
class DashboardData:
    daily: dict
    data_quality: int
    at_risk: int
    patterns: list[str]
    staffing: dict
    distribution: list[dict]
    anniversaries: list[dict]
    month_progress: int


class AnalyticsService:
    """Read side: every view is derived fresh from the current snapshot."""

    def __init__(self, store: RecordStore):
        self._store = store

    @property
    def _employees(self) -> tuple[Employee, ...]:
        return self._store.snapshot.employees

    def daily(self, work_date: str) -> DailyStats:
        return daily_stats(self._employees, work_date)

    def monthly(self, year_month: str) -> MonthlyCalendar:
        return monthly_calendar(self._employees, year_month)

    def patterns(self, year_month: str) -> list[str]:
        return detect_patterns(self._employees, year_month)

    def staffing(self) -> StaffingBalance:
        return staffing_balance(self._employees)

    def dashboard(self, *, work_date: str, year_month: str) -> DashboardData:
        employees = self._employees
        balance = staffing_balance(employees)
        return DashboardData(
            daily=daily_to_dict(daily_stats(employees, work_date)),
            data_quality=data_quality_score(employees),
            at_risk=sum(1 for e in employees if is_at_risk(e)),
            patterns=detect_patterns(employees, year_month),
            staffing={
                "balanced": balance.balanced,
                "recommendation": balance.recommendation,
                "busiest_day": balance.busiest_day.value,
                "lightest_day": balance.lightest_day.value,
            },
            distribution=[
                {"name": b.short_name, "full": b.weekday.value, "count": b.count}
                for b in day_off_distribution(employees)
            ],
            anniversaries=[
                {"id": e.employee_id, "full_name": e.full_name, "seniority": seniority_label(e.entry_date)}
                for e in upcoming_anniversaries(employees)
            ],
            month_progress=month_progress(),
        )

    def directory(
        self,
        *,
        status: Optional[WorkStatus] = WorkStatus.ACTIVE,
        search: str = "",
        duplicates_only: bool = False,
        risk_only: bool = False,
    ) -> list[dict]:
        employees = self._employees
        id_counts = legal_id_counts(employees)
        slot_counts = supervisor_slot_counts(employees)
        rows = filter_directory(
            employees,
            status=status,
            search=search,
            duplicates_only=duplicates_only,
            risk_only=risk_only,
        )
        return [
            {
                "id": e.employee_id,
                "full_name": e.full_name,
                "legal_id": e.legal_id,
                "job_title": e.job_title,
                "supervisor": e.supervisor,
                "shift": e.shift.value,
                "day_off": e.day_off.value,
                "status": e.status.value,
                "reliability_score": e.reliability_score,
                "profile_score": profile_score(e),
                "seniority": seniority_label(e.entry_date),
                "duplicate_legal_id": is_legal_id_duplicate(e, id_counts),
                "duplicate_supervisor_slot": is_supervisor_slot_duplicate(e, slot_counts),
                "at_risk": is_at_risk(e),
            }
            for e in rows
        ]

    def daily_report(self, work_date: str) -> str:
        return reports.daily_report_text(self.daily(work_date))

    def shift_log_summary(self, work_date: str) -> str:
        return reports.shift_log_summary(self.daily(work_date))

    def warning_request(self, employee_id: str, work_date: str) -> str:
        employee = self._store.snapshot.find_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee does not exist")
        return reports.warning_request_text(employee, work_date)


def daily_to_dict(stats: DailyStats) -> dict:
    return {
        "date": stats.date,
        "weekday": stats.weekday.value,
        "called_total": stats.called_total,
        "present": stats.present,
        "late": stats.late,
        "absent": stats.absent,
        "medical": stats.medical,
        "excused": stats.excused,
        "working_total": stats.working_total,
        "attendance_rate": stats.attendance_rate,
        "absence_rate": stats.absence_rate,
        "called": [{"id": e.employee_id, "full_name": e.full_name, "mark": _mark(e, stats.date)} for e in stats.called],
        "off": [{"id": e.employee_id, "full_name": e.full_name} for e in stats.off],
    }


def monthly_to_dict(calendar: MonthlyCalendar) -> dict:
    return {
        "month": calendar.year_month,
        "days": [
            {"date": d.date, "day": d.day, "narrow_name": d.narrow_name, "weekday": d.weekday.value}
            for d in calendar.days
        ],
        "rows": [
            {
                "id": row.employee.employee_id,
                "full_name": row.employee.full_name,
                "statuses": [s.value if s is not None else None for s in row.statuses],
            }
            for row in calendar.rows
        ],
    }


def _mark(employee: Employee, iso_date: str) -> Optional[str]:
    mark = employee.mark_on(iso_date)
    return mark.value if mark is not None else None
