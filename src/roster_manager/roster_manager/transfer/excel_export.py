from __future__ import annotations

import io

import pandas as pd

from ..analytics.model import MonthlyCalendar
from .csv_export import BLANK_CELL


def monthly_frame(calendar: MonthlyCalendar) -> pd.DataFrame:
    data = []
    for row in calendar.rows:
        record = {"Name": row.employee.full_name}
        for day, status in zip(calendar.days, row.statuses):
            record[day.date] = status.value if status is not None else BLANK_CELL
        data.append(record)
    return pd.DataFrame(data, columns=["Name"] + [d.date for d in calendar.days])


def monthly_xlsx(calendar: MonthlyCalendar) -> bytes:
    """Monthly grid as an in-memory Excel workbook."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        monthly_frame(calendar).to_excel(writer, index=False, sheet_name=calendar.year_month)
    return output.getvalue()
