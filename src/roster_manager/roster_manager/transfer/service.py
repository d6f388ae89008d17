from __future__ import annotations

from typing import Optional

from ..analytics.monthly import monthly_calendar
from ..analytics.views import filter_directory
from ..core.enums import WorkStatus
from ..store.store import RecordStore
from .csv_export import import_format_csv, monthly_csv, roster_csv
from .excel_export import monthly_xlsx


class ExportService:
    def __init__(self, store: RecordStore):
        self._store = store

    def roster_csv(self, *, status: Optional[WorkStatus] = None, search: str = "") -> str:
        employees = filter_directory(self._store.snapshot.employees, status=status, search=search)
        return roster_csv(employees)

    def import_format_csv(self) -> str:
        return import_format_csv(self._store.snapshot.employees)

    def monthly_csv(self, year_month: str) -> str:
        return monthly_csv(monthly_calendar(self._store.snapshot.employees, year_month))

    def monthly_xlsx(self, year_month: str) -> bytes:
        return monthly_xlsx(monthly_calendar(self._store.snapshot.employees, year_month))
