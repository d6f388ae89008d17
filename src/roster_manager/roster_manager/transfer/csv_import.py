"""Bulk roster import.

Row layout: full name, legal id, email, entry date, (unused), shift code,
day-off name, supervisor, job title. Fields may be separated by ``,`` or ``;``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import parse_iso_date, today_iso
from ..common.identifiers import new_id
from ..core.constants import DEFAULT_JOB_TITLE, UNASSIGNED_SUPERVISOR
from ..core.enums import DayOff, ShiftType
from ..core.exceptions import ValidationError
from ..employees.model import Employee

logger = logging.getLogger(__name__)

HEADER_LABELS = {"name", "full name"}
SEPARATORS = ",;"


def split_row(line: str) -> list[str]:
    """Split on commas/semicolons outside double quotes; quotes are removed."""
    fields: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                buf.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch in SEPARATORS and not in_quotes:
            fields.append("".join(buf).strip())
            buf = []
        else:
            buf.append(ch)
        i += 1
    fields.append("".join(buf).strip())
    return fields


def _column(parts: list[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""


def _shift(code: str) -> ShiftType:
    for shift in ShiftType:
        if shift.value.upper() == code.upper():
            return shift
    return ShiftType.PM


def _day_off(name: str) -> DayOff:
    try:
        return DayOff(name.upper())
    except ValueError:
        return DayOff.SUNDAY


def parse_row(line: str, *, id_factory: Callable[[], str] = new_id, default_entry_date: Optional[str] = None) -> Optional[Employee]:
    """Build a new Active employee from one row, or None when the row is skipped."""
    if not line.strip():
        return None

    parts = split_row(line)
    name = _column(parts, 0)
    legal_id = _column(parts, 1)
    if not name or not legal_id or name.lower() in HEADER_LABELS:
        return None

    default_entry_date = default_entry_date or today_iso()
    entry_date = _column(parts, 3)
    if entry_date:
        try:
            entry_date = parse_iso_date(entry_date).isoformat()
        except ValidationError:
            logger.debug("import row %r: unreadable entry date %r, using %s", name, entry_date, default_entry_date)
            entry_date = default_entry_date
    else:
        entry_date = default_entry_date

    return Employee(
        employee_id=id_factory(),
        legal_id=legal_id,
        full_name=name,
        email=_column(parts, 2),
        entry_date=entry_date,
        shift=_shift(_column(parts, 5)),
        day_off=_day_off(_column(parts, 6)),
        supervisor=_column(parts, 7) or UNASSIGNED_SUPERVISOR,
        job_title=_column(parts, 8) or DEFAULT_JOB_TITLE,
    )


def parse_roster(text: str, *, id_factory: Callable[[], str] = new_id) -> list[Employee]:
    lines: Iterable[str] = text.splitlines()
    employees = []
    skipped = 0
    default_entry_date = today_iso()
    for line in lines:
        employee = parse_row(line, id_factory=id_factory, default_entry_date=default_entry_date)
        if employee is None:
            if line.strip():
                skipped += 1
            continue
        employees.append(employee)

    logger.info("parsed roster import: rows=%d skipped=%d", len(employees), skipped)
    return employees
