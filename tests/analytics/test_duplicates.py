from __future__ import annotations

from src.roster_manager.roster_manager.analytics.duplicates import (
    is_legal_id_duplicate,
    is_supervisor_slot_duplicate,
    legal_id_counts,
    supervisor_slot_counts,
)
from src.roster_manager.roster_manager.core.enums import ShiftType, WorkStatus


def test_legal_id_map_counts_only_active(make_employee):
    a = make_employee(legal_id="V-1")
    b = make_employee(legal_id="V-1")
    gone = make_employee(legal_id="V-1", status=WorkStatus.EXIT)

    counts = legal_id_counts([a, b, gone])

    assert counts["V-1"] == 2
    assert is_legal_id_duplicate(a, counts)
    assert not is_legal_id_duplicate(gone, counts)


def test_single_active_collision_with_inactive_is_not_duplicate(make_employee):
    a = make_employee(legal_id="V-9")
    gone = make_employee(legal_id="V-9", status=WorkStatus.LEAVE)

    counts = legal_id_counts([a, gone])
    assert not is_legal_id_duplicate(a, counts)


def test_supervisor_slot_is_case_insensitive_and_trimmed(make_employee):
    a = make_employee(shift=ShiftType.AM, supervisor="Maria ")
    b = make_employee(shift=ShiftType.AM, supervisor="maria")
    c = make_employee(shift=ShiftType.PM, supervisor="Maria")

    counts = supervisor_slot_counts([a, b, c])

    assert is_supervisor_slot_duplicate(a, counts)
    assert is_supervisor_slot_duplicate(b, counts)
    assert not is_supervisor_slot_duplicate(c, counts)


def test_unassigned_supervisor_is_excluded(make_employee):
    a = make_employee(supervisor="Unassigned")
    b = make_employee(supervisor="Unassigned")

    counts = supervisor_slot_counts([a, b])

    assert not counts
    assert not is_supervisor_slot_duplicate(a, counts)
