"""Duplicate maps, rebuilt from scratch on every read.

Both maps only count active employees; anyone else is never flagged.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from ..core.constants import UNASSIGNED_SUPERVISOR
from ..employees.model import Employee


def legal_id_counts(employees: Sequence[Employee]) -> Counter:
    return Counter(e.legal_id for e in employees if e.is_active)


def supervisor_slot_key(employee: Employee) -> Optional[str]:
    supervisor = (employee.supervisor or "").strip()
    if not supervisor or supervisor == UNASSIGNED_SUPERVISOR:
        return None
    return f"{employee.shift.value}-{supervisor.lower()}"


def supervisor_slot_counts(employees: Sequence[Employee]) -> Counter:
    counts: Counter = Counter()
    for e in employees:
        if not e.is_active:
            continue
        key = supervisor_slot_key(e)
        if key is not None:
            counts[key] += 1
    return counts


def is_legal_id_duplicate(employee: Employee, counts: Counter) -> bool:
    return employee.is_active and counts[employee.legal_id] > 1


def is_supervisor_slot_duplicate(employee: Employee, counts: Counter) -> bool:
    key = supervisor_slot_key(employee)
    return employee.is_active and key is not None and counts[key] > 1
