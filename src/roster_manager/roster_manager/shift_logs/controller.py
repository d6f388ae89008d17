from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    logs = container.shift_log_service

    @app.route("/api/logs", methods=["GET"], endpoint="logs_list")
    def logs_list():
        return jsonify({"success": True, "data": [asdict(entry) for entry in logs.list_entries()]})

    @app.route("/api/logs", methods=["POST"], endpoint="logs_create")
    @json_errors
    def logs_create():
        body = json_body()
        entry = logs.add(body.get("text", ""), author=body.get("author", ""))
        return jsonify({"success": True, "data": asdict(entry)}), 201

    @app.route("/api/logs/<entry_id>", methods=["PUT"], endpoint="logs_update")
    @json_errors
    def logs_update(entry_id: str):
        entry = logs.edit(entry_id, json_body().get("text", ""))
        return jsonify({"success": True, "data": asdict(entry)})

    @app.route("/api/logs/<entry_id>", methods=["DELETE"], endpoint="logs_delete")
    @json_errors
    def logs_delete(entry_id: str):
        logs.delete(entry_id)
        return jsonify({"success": True})
