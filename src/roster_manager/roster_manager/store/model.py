from __future__ import annotations

from dataclasses import dataclass

from ..employees.model import Employee
from ..shift_logs.model import ShiftLogEntry


@dataclass(frozen=True)
class RosterSnapshot:
    """Whole in-memory state: the roster plus shift logs (newest log first)."""

    employees: tuple[Employee, ...] = ()
    logs: tuple[ShiftLogEntry, ...] = ()

    def find_employee(self, employee_id: str):
        for e in self.employees:
            if e.employee_id == employee_id:
                return e
        return None

    def active_employees(self) -> tuple[Employee, ...]:
        return tuple(e for e in self.employees if e.is_active)


EMPTY_SNAPSHOT = RosterSnapshot()
