"""Per-employee scores: reliability, profile completeness, seniority."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.numbers import clamp, round_half_up
from ..core.constants import (
    MAX_SCORE,
    PROFILE_WEIGHTS,
    RELIABILITY_DELTAS,
    RISK_SCORE_THRESHOLD,
    UNASSIGNED_SUPERVISOR,
)
from ..core.exceptions import ValidationError
from .model import Employee, Incident


def reliability_score(incidents: Iterable[Incident]) -> int:
    """100 plus the fixed delta of every incident, clamped to [0, 100]."""
    score = MAX_SCORE + sum(RELIABILITY_DELTAS.get(inc.type, 0) for inc in incidents)
    return clamp(score, 0, MAX_SCORE)


def is_at_risk(employee: Employee) -> bool:
    return employee.is_active and employee.reliability_score < RISK_SCORE_THRESHOLD


def _filled(value: Optional[str]) -> bool:
    return bool(value and str(value).strip())


def profile_checks(employee: Employee) -> dict[str, bool]:
    supervisor = (employee.supervisor or "").strip()
    return {
        "full_name": _filled(employee.full_name),
        "legal_id": _filled(employee.legal_id),
        "email": "@" in (employee.email or ""),
        "job_title": _filled(employee.job_title),
        "supervisor": bool(supervisor) and supervisor != UNASSIGNED_SUPERVISOR,
        "entry_date": _filled(employee.entry_date),
        "shift": employee.shift is not None,
        "day_off": employee.day_off is not None,
    }


def profile_score(employee: Employee) -> int:
    checks = profile_checks(employee)
    return sum(PROFILE_WEIGHTS[name] for name, ok in checks.items() if ok)


def data_quality_score(employees: Sequence[Employee]) -> int:
    """Mean profile score over active employees, rounded; 0 without active employees."""
    active = [e for e in employees if e.is_active]
    if not active:
        return 0
    return round_half_up(sum(profile_score(e) for e in active) / len(active))


def seniority_label(entry_date: Optional[str], *, today: Optional[date] = None) -> str:
    if not entry_date:
        return "Recent"
    try:
        start = parse_iso_date(entry_date)
    except ValidationError:
        return "Recent"

    today = today or now_local().date()
    days = abs((today - start).days)
    if days < 30:
        return f"{days}d"

    years, rest = divmod(days, 365)
    months = rest // 30
    parts = []
    if years > 0:
        parts.append(f"{years}y")
    if months > 0:
        parts.append(f"{months}m")
    return " ".join(parts) or "1m"
