from __future__ import annotations

from src.roster_manager.roster_manager.core.enums import DayOff, ShiftType, WorkStatus
from src.roster_manager.roster_manager.transfer.csv_export import import_format_csv
from src.roster_manager.roster_manager.transfer.csv_import import parse_roster, parse_row, split_row


def test_split_row_honours_quotes_and_both_separators():
    assert split_row('"Perez, Ana";V-1;ana@x.com') == ["Perez, Ana", "V-1", "ana@x.com"]
    assert split_row('a, b ,c') == ["a", "b", "c"]
    assert split_row('"say ""hi""",x') == ['say "hi"', "x"]


def test_header_and_blank_rows_are_skipped(sequential_ids):
    text = "Name,LegalId,Email\n\nAna,V-1,ana@x.com,2024-02-01,,AM,MONDAY,Carlos,Lead\n"

    employees = parse_roster(text, id_factory=sequential_ids)

    assert len(employees) == 1
    ana = employees[0]
    assert ana.employee_id == "id1"
    assert ana.full_name == "Ana"
    assert ana.legal_id == "V-1"
    assert ana.entry_date == "2024-02-01"
    assert ana.shift == ShiftType.AM
    assert ana.day_off == DayOff.MONDAY
    assert ana.supervisor == "Carlos"
    assert ana.job_title == "Lead"
    assert ana.status == WorkStatus.ACTIVE
    assert ana.reliability_score == 100


def test_missing_columns_fall_back_to_defaults(sequential_ids):
    employee = parse_row("Luis;V-2", id_factory=sequential_ids, default_entry_date="2024-05-05")

    assert employee.shift == ShiftType.PM
    assert employee.day_off == DayOff.SUNDAY
    assert employee.supervisor == "Unassigned"
    assert employee.job_title == "Agent"
    assert employee.entry_date == "2024-05-05"
    assert employee.email == ""


def test_unknown_codes_fall_back_to_defaults(sequential_ids):
    employee = parse_row("Luis,V-2,,,,NIGHT,FUNDAY", id_factory=sequential_ids, default_entry_date="2024-05-05")

    assert employee.shift == ShiftType.PM
    assert employee.day_off == DayOff.SUNDAY


def test_rows_without_name_or_legal_id_are_skipped(sequential_ids):
    text = "Ana,,ana@x.com\n,V-9\nEva,V-3\n"

    employees = parse_roster(text, id_factory=sequential_ids)

    assert [e.full_name for e in employees] == ["Eva"]


def test_unreadable_entry_date_keeps_row_with_default_date(sequential_ids):
    employee = parse_row("Luis,V-2,,31/12/2020", id_factory=sequential_ids, default_entry_date="2024-05-05")

    assert employee.full_name == "Luis"
    assert employee.legal_id == "V-2"
    assert employee.entry_date == "2024-05-05"


def test_import_format_export_round_trips(make_employee, sequential_ids):
    exported = [
        make_employee(full_name="Perez; Ana", supervisor="Carlos", day_off=DayOff.MONDAY),
        make_employee(full_name="Luis", shift=ShiftType.PM, email="", job_title="Team Lead"),
    ]

    reimported = parse_roster(import_format_csv(exported), id_factory=sequential_ids)

    def fields(e):
        return (e.full_name, e.legal_id, e.email, e.entry_date, e.shift, e.day_off, e.supervisor, e.job_title)

    assert [fields(e) for e in reimported] == [fields(e) for e in exported]
