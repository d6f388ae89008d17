from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.enums import DayOff
from ..core.exceptions import ValidationError

_WEEKDAYS = tuple(DayOff)

# es-ES narrow weekday names, Monday first
NARROW_WEEKDAY = ("L", "M", "X", "J", "V", "S", "D")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r}") from None
    return parsed.year, parsed.month


def weekday_of(day: date) -> DayOff:
    return _WEEKDAYS[day.weekday()]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_iso() -> str:
    return now_local().date().isoformat()
