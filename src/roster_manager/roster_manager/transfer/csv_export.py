from __future__ import annotations

import csv
import io
from typing import Sequence

from ..analytics.model import MonthlyCalendar
from ..employees.model import Employee

ROSTER_HEADER = ["ID", "Name", "JobTitle", "LegalId", "Shift", "DayOff", "EntryDate", "Supervisor", "Score", "Status"]
IMPORT_HEADER = ["Name", "LegalId", "Email", "EntryDate", "Status", "Shift", "DayOff", "Supervisor", "JobTitle"]
BLANK_CELL = "-"


def _write(header: list[str], rows, *, quoting: int = csv.QUOTE_MINIMAL) -> str:
    out = io.StringIO()
    writer = csv.writer(out, quoting=quoting, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return out.getvalue()


def roster_csv(employees: Sequence[Employee]) -> str:
    """Directory export with a fixed header."""
    rows = (
        [
            e.employee_id,
            e.full_name,
            e.job_title,
            e.legal_id,
            e.shift.value,
            e.day_off.value,
            e.entry_date,
            e.supervisor,
            e.reliability_score,
            e.status.value,
        ]
        for e in employees
    )
    return _write(ROSTER_HEADER, rows)


def import_format_csv(employees: Sequence[Employee]) -> str:
    """Export in the bulk import column order so the file can be re-imported.

    Every field is quoted because the importer also splits on semicolons.
    """
    rows = (
        [
            e.full_name,
            e.legal_id,
            e.email,
            e.entry_date,
            e.status.value,
            e.shift.value,
            e.day_off.value,
            e.supervisor,
            e.job_title,
        ]
        for e in employees
    )
    return _write(IMPORT_HEADER, rows, quoting=csv.QUOTE_ALL)


def monthly_csv(calendar: MonthlyCalendar) -> str:
    header = ["Name"] + [d.date for d in calendar.days]
    rows = (
        [row.employee.full_name] + [s.value if s is not None else BLANK_CELL for s in row.statuses]
        for row in calendar.rows
    )
    return _write(header, rows)
