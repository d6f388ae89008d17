from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_iso
from ..common.http import json_errors
from ..common.validators import require_iso_date
from ..container import Container
from .service import daily_to_dict, monthly_to_dict


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service

    def _date_arg() -> str:
        return require_iso_date(request.args.get("date") or today_iso(), "Date")

    def _month_arg() -> str:
        return request.args.get("month") or today_iso()[:7]

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @json_errors
    def dashboard():
        data = analytics.dashboard(work_date=_date_arg(), year_month=_month_arg())
        return jsonify({"success": True, "data": asdict(data)})

    @app.route("/api/daily", methods=["GET"], endpoint="daily_stats")
    @json_errors
    def daily_stats():
        return jsonify({"success": True, "data": daily_to_dict(analytics.daily(_date_arg()))})

    @app.route("/api/monthly", methods=["GET"], endpoint="monthly_calendar")
    @json_errors
    def monthly_calendar():
        month = _month_arg()
        return jsonify(
            {
                "success": True,
                "data": monthly_to_dict(analytics.monthly(month)),
                "patterns": analytics.patterns(month),
            }
        )

    @app.route("/api/reports/daily", methods=["GET"], endpoint="report_daily")
    @json_errors
    def report_daily():
        return jsonify({"success": True, "text": analytics.daily_report(_date_arg())})

    @app.route("/api/reports/shift-log-summary", methods=["GET"], endpoint="report_shift_log_summary")
    @json_errors
    def report_shift_log_summary():
        return jsonify({"success": True, "text": analytics.shift_log_summary(_date_arg())})

    @app.route("/api/employees/<employee_id>/warning-request", methods=["GET"], endpoint="report_warning_request")
    @json_errors
    def report_warning_request(employee_id: str):
        return jsonify({"success": True, "text": analytics.warning_request(employee_id, _date_arg())})
