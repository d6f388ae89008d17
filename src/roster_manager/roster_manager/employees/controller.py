from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import flag, json_body, json_errors
from ..common.validators import require_enum
from ..core.enums import WorkStatus
from ..container import Container
from ..persistence.codec import employee_to_dict
from .scoring import profile_score


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    def _detail(employee) -> dict:
        data = employee_to_dict(employee)
        data["profile_score"] = profile_score(employee)
        return data

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @json_errors
    def employees_list():
        status_s = request.args.get("status") or WorkStatus.ACTIVE.value
        status = None if status_s == "All" else require_enum(WorkStatus, status_s, "Status")
        rows = container.analytics_service.directory(
            status=status,
            search=request.args.get("q", ""),
            duplicates_only=flag(request.args.get("duplicates")),
            risk_only=flag(request.args.get("risk")),
        )
        return jsonify({"success": True, "data": rows})

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @json_errors
    def employees_create():
        body = json_body()
        employee = roster.register(
            full_name=body.get("full_name", ""),
            legal_id=body.get("legal_id", ""),
            entry_date=body.get("entry_date", ""),
            shift=body.get("shift", "PM"),
            day_off=body.get("day_off", "SUNDAY"),
            email=body.get("email", ""),
            job_title=body.get("job_title", ""),
            supervisor=body.get("supervisor", ""),
            confirm_duplicate=flag(body.get("confirm_duplicate")),
        )
        return jsonify({"success": True, "data": _detail(employee)}), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_detail")
    @json_errors
    def employees_detail(employee_id: str):
        return jsonify({"success": True, "data": _detail(roster.get(employee_id))})

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    @json_errors
    def employees_update(employee_id: str):
        body = json_body()
        employee = roster.update(
            employee_id,
            full_name=body.get("full_name", ""),
            legal_id=body.get("legal_id", ""),
            entry_date=body.get("entry_date", ""),
            shift=body.get("shift", ""),
            day_off=body.get("day_off", ""),
            email=body.get("email", ""),
            job_title=body.get("job_title", ""),
            supervisor=body.get("supervisor", ""),
            end_date=body.get("end_date"),
            notes=body.get("notes"),
        )
        return jsonify({"success": True, "data": _detail(employee)})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @json_errors
    def employees_delete(employee_id: str):
        roster.delete(employee_id, confirm=flag(request.args.get("confirm")))
        return jsonify({"success": True})

    @app.route("/api/employees/clear", methods=["POST"], endpoint="employees_clear")
    @json_errors
    def employees_clear():
        removed = roster.clear_all(confirm=flag(json_body().get("confirm")))
        return jsonify({"success": True, "removed": removed})

    @app.route("/api/employees/import", methods=["POST"], endpoint="employees_import")
    @json_errors
    def employees_import():
        upload = request.files.get("file")
        if upload is not None:
            text = upload.read().decode("utf-8-sig", errors="replace")
        else:
            text = request.get_data(as_text=True)
        imported = roster.import_rows(text)
        return jsonify({"success": True, "imported": len(imported)})

    @app.route("/api/employees/<employee_id>/attendance", methods=["POST"], endpoint="employees_attendance")
    @json_errors
    def employees_attendance(employee_id: str):
        body = json_body()
        employee = roster.mark_attendance(employee_id, work_date=body.get("date", ""), mark=body.get("status", ""))
        return jsonify({"success": True, "data": _detail(employee)})

    @app.route("/api/attendance/mark-all-present", methods=["POST"], endpoint="attendance_mark_all_present")
    @json_errors
    def attendance_mark_all_present():
        marked = roster.mark_all_present(work_date=json_body().get("date", ""))
        return jsonify({"success": True, "marked": marked})

    @app.route("/api/attendance/autofill-days-off", methods=["POST"], endpoint="attendance_autofill_days_off")
    @json_errors
    def attendance_autofill_days_off():
        marked = roster.autofill_days_off(work_date=json_body().get("date", ""))
        return jsonify({"success": True, "marked": marked})

    @app.route("/api/employees/<employee_id>/incidents", methods=["POST"], endpoint="employees_incident")
    @json_errors
    def employees_incident(employee_id: str):
        body = json_body()
        employee = roster.add_incident(
            employee_id,
            incident_type=body.get("type", ""),
            incident_date=body.get("date"),
            note=body.get("note", ""),
            severity=body.get("severity", "Medium"),
        )
        return jsonify({"success": True, "data": _detail(employee)}), 201

    @app.route("/api/employees/<employee_id>/coaching", methods=["POST"], endpoint="employees_coaching")
    @json_errors
    def employees_coaching(employee_id: str):
        body = json_body()
        employee = roster.add_coaching(
            employee_id,
            notes=body.get("notes", ""),
            topic=body.get("topic", "Performance"),
            entry_date=body.get("date"),
            action_items=body.get("action_items", ""),
        )
        return jsonify({"success": True, "data": _detail(employee)}), 201

    @app.route(
        "/api/employees/<employee_id>/coaching/<entry_id>/complete",
        methods=["POST"],
        endpoint="employees_coaching_complete",
    )
    @json_errors
    def employees_coaching_complete(employee_id: str, entry_id: str):
        employee = roster.complete_coaching(employee_id, entry_id)
        return jsonify({"success": True, "data": _detail(employee)})

    @app.route("/api/employees/<employee_id>/status", methods=["POST"], endpoint="employees_status")
    @json_errors
    def employees_status(employee_id: str):
        body = json_body()
        employee = roster.change_status(
            employee_id,
            status=body.get("status", ""),
            effective_date=body.get("date"),
            note=body.get("note"),
        )
        return jsonify({"success": True, "data": _detail(employee)})
