from __future__ import annotations

from typing import Sequence

from ..core.constants import STAFFING_TOLERANCE
from ..core.enums import DayOff
from ..employees.model import Employee
from .model import DayOffBucket, StaffingBalance


def day_off_counts(employees: Sequence[Employee]) -> dict[DayOff, int]:
    counts = {day: 0 for day in DayOff}
    for e in employees:
        if e.is_active and e.day_off in counts:
            counts[e.day_off] += 1
    return counts


def day_off_distribution(employees: Sequence[Employee]) -> list[DayOffBucket]:
    return [
        DayOffBucket(weekday=day, short_name=day.value[:3], count=count)
        for day, count in day_off_counts(employees).items()
    ]


def staffing_balance(employees: Sequence[Employee]) -> StaffingBalance:
    """Warn when one weekday holds more than average + 2 days off.

    Ties resolve to the first weekday in Monday..Sunday order.
    """
    counts = day_off_counts(employees)
    active_total = sum(1 for e in employees if e.is_active)
    average = active_total / len(counts)

    busiest = max(DayOff, key=lambda d: counts[d])
    lightest = min(DayOff, key=lambda d: counts[d])

    if counts[busiest] > average + STAFFING_TOLERANCE:
        recommendation = (
            f"Warning: too many days off on {busiest.value} ({counts[busiest]}). "
            f"Move staff to {lightest.value}."
        )
        balanced = False
    else:
        recommendation = "Day-off balance is optimal."
        balanced = True

    return StaffingBalance(
        balanced=balanced,
        recommendation=recommendation,
        busiest_day=busiest,
        lightest_day=lightest,
        average=average,
    )
