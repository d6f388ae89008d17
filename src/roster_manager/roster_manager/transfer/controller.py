from __future__ import annotations

from flask import Flask, request

from ..common.http import json_errors
from ..common.validators import require_enum
from ..container import Container
from ..core.enums import WorkStatus

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    exports = container.export_service

    def _download(body: bytes, *, filename: str, mimetype: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _csv(text: str, filename: str):
        return _download(text.encode("utf-8-sig"), filename=filename, mimetype="text/csv")

    @app.route("/export/roster.csv", methods=["GET"], endpoint="export_roster_csv")
    @json_errors
    def export_roster_csv():
        status_s = request.args.get("status") or "All"
        status = None if status_s == "All" else require_enum(WorkStatus, status_s, "Status")
        return _csv(exports.roster_csv(status=status, search=request.args.get("q", "")), "roster.csv")

    @app.route("/export/roster-import.csv", methods=["GET"], endpoint="export_roster_import_csv")
    def export_roster_import_csv():
        return _csv(exports.import_format_csv(), "roster_import.csv")

    @app.route("/export/monthly/<month>.csv", methods=["GET"], endpoint="export_monthly_csv")
    @json_errors
    def export_monthly_csv(month: str):
        return _csv(exports.monthly_csv(month), f"monthly_report_{month}.csv")

    @app.route("/export/monthly/<month>.xlsx", methods=["GET"], endpoint="export_monthly_xlsx")
    @json_errors
    def export_monthly_xlsx(month: str):
        return _download(exports.monthly_xlsx(month), filename=f"monthly_report_{month}.xlsx", mimetype=XLSX_MIMETYPE)
