from __future__ import annotations

from datetime import date

from src.roster_manager.roster_manager.analytics import reports
from src.roster_manager.roster_manager.analytics.daily import daily_stats
from src.roster_manager.roster_manager.analytics.views import filter_directory, month_progress, upcoming_anniversaries
from src.roster_manager.roster_manager.core.enums import AttendanceMark, WorkStatus

MONDAY = "2024-01-01"


def test_directory_defaults_to_active_and_searches(make_employee):
    ana = make_employee(full_name="Ana Perez", supervisor="Carlos")
    luis = make_employee(full_name="Luis Gomez", job_title="Team Lead")
    gone = make_employee(full_name="Ana Exit", status=WorkStatus.EXIT)
    employees = [ana, luis, gone]

    assert filter_directory(employees) == [ana, luis]
    assert filter_directory(employees, search="ana") == [ana]
    assert filter_directory(employees, search="CARLOS") == [ana]
    assert filter_directory(employees, search="lead") == [luis]
    assert filter_directory(employees, status=None, search="ana") == [ana, gone]


def test_directory_duplicates_and_risk_filters(make_employee):
    a = make_employee(legal_id="V-1", reliability_score=80)
    b = make_employee(legal_id="V-1")
    c = make_employee(legal_id="V-2", reliability_score=60, status=WorkStatus.EXIT)

    assert filter_directory([a, b, c], duplicates_only=True) == [a, b]
    assert filter_directory([a, b, c], risk_only=True) == [a]


def test_anniversaries_match_current_month(make_employee):
    june = make_employee(entry_date="2020-06-10")
    may = make_employee(entry_date="2020-05-10")
    blank = make_employee(entry_date="")

    assert upcoming_anniversaries([june, may, blank], today=date(2024, 6, 1)) == [june]


def test_month_progress():
    assert month_progress(today=date(2024, 2, 29)) == 100
    assert month_progress(today=date(2024, 4, 15)) == 50


def test_daily_report_text_includes_rates(make_employee):
    employees = [
        make_employee(attendance={MONDAY: AttendanceMark.PRESENT}),
        make_employee(attendance={MONDAY: AttendanceMark.ABSENT}),
    ]
    text = reports.daily_report_text(daily_stats(employees, MONDAY))

    assert "REPORT 2024-01-01" in text
    assert "EFE: 50% | IA: 50%" in text


def test_warning_request_names_employee(make_employee):
    text = reports.warning_request_text(make_employee(full_name="Ana", legal_id="V-7"), MONDAY)

    assert "- Employee: Ana" in text
    assert "- Legal id: V-7" in text
    assert "- Date: 2024-01-01" in text
