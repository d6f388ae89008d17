"""Directory and dashboard helper views."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import days_in_month, now_local, parse_iso_date
from ..common.numbers import round_half_up
from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.scoring import is_at_risk
from .duplicates import is_legal_id_duplicate, legal_id_counts


def filter_directory(
    employees: Sequence[Employee],
    *,
    status: Optional[WorkStatus] = WorkStatus.ACTIVE,
    search: str = "",
    duplicates_only: bool = False,
    risk_only: bool = False,
) -> list[Employee]:
    """Filter the employee directory.

    ``duplicates_only`` and ``risk_only`` short-circuit the status/search filters.
    ``status=None`` means all statuses.
    """
    if duplicates_only:
        counts = legal_id_counts(employees)
        return [e for e in employees if is_legal_id_duplicate(e, counts)]
    if risk_only:
        return [e for e in employees if is_at_risk(e)]

    needle = (search or "").strip().lower()
    out = []
    for e in employees:
        if status is not None and e.status != status:
            continue
        haystack = (e.full_name, e.legal_id, e.supervisor, e.job_title or "")
        if needle and not any(needle in (field or "").lower() for field in haystack):
            continue
        out.append(e)
    return out


def upcoming_anniversaries(employees: Sequence[Employee], *, today: Optional[date] = None) -> list[Employee]:
    """Active employees whose entry month is the current month."""
    today = today or now_local().date()
    out = []
    for e in employees:
        if not e.is_active or not e.entry_date:
            continue
        try:
            entry = parse_iso_date(e.entry_date)
        except ValidationError:
            continue
        if entry.month == today.month:
            out.append(e)
    return out


def month_progress(*, today: Optional[date] = None) -> int:
    today = today or now_local().date()
    return round_half_up(today.day / days_in_month(today.year, today.month) * 100)
