"""Plain-text reports meant to be pasted into chat or email."""

from __future__ import annotations

from ..core.constants import UNASSIGNED_SUPERVISOR
from ..employees.model import Employee
from .model import DailyStats


def daily_report_text(stats: DailyStats) -> str:
    return (
        f"REPORT {stats.date}\n"
        f"Called: {stats.called_total} | Present: {stats.present}\n"
        f"Late: {stats.late} | Absent: {stats.absent}\n"
        f"Medical: {stats.medical} | Excused: {stats.excused}\n"
        f"EFE: {stats.attendance_rate}% | IA: {stats.absence_rate}%\n"
        f"Off: {len(stats.off)}"
    )


def shift_log_summary(stats: DailyStats) -> str:
    """Pre-filled shift log template for the selected date."""
    return (
        f"SHIFT LOG - {stats.date}\n"
        "\n"
        "OPERATIONS\n"
        f"- Called: {stats.called_total}\n"
        f"- Present: {stats.present} ({stats.attendance_rate}%)\n"
        f"- Late: {stats.late}\n"
        f"- Absent: {stats.absent} ({stats.absence_rate}%)\n"
        f"- Excused: {stats.medical + stats.excused}\n"
        "\n"
        "NOTES\n"
        "- [Relevant incidents...]\n"
        "- [Pending items...]\n"
        "\n"
        "Shift closed with no major issues."
    )


def warning_request_text(employee: Employee, iso_date: str) -> str:
    """Formal request to warn an employee for an unjustified absence."""
    return (
        "Good afternoon.\n"
        "Kind regards.\n"
        "\n"
        "I am writing to request a formal warning for the following employee:\n"
        "\n"
        f"- Employee: {employee.full_name}\n"
        f"- Job title: {employee.job_title or 'N/A'}\n"
        f"- Legal id: {employee.legal_id}\n"
        f"- Date: {iso_date}\n"
        "- Reason: Unjustified absence\n"
        f"- Shift: {employee.shift.value}\n"
        f"- Supervisor: {employee.supervisor or UNASSIGNED_SUPERVISOR}"
    )
