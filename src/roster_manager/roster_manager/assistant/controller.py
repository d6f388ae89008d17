from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors
from ..common.validators import require_non_empty
from ..container import Container
from .model import ChatMessage


def register(app: Flask, container: Container) -> None:
    assistant = container.assistant_service

    @app.route("/api/assistant/chat", methods=["POST"], endpoint="assistant_chat")
    @json_errors
    def assistant_chat():
        body = json_body()
        message = require_non_empty(body.get("message"), "Message")
        raw_history = body.get("history")
        history = [
            ChatMessage(role=str(m.get("role") or "user"), text=str(m.get("text") or ""))
            for m in (raw_history if isinstance(raw_history, list) else [])
            if isinstance(m, dict)
        ]
        return jsonify({"success": True, "reply": assistant.send(history, message)})

    @app.route("/api/assistant/analyze", methods=["POST"], endpoint="assistant_analyze")
    def assistant_analyze():
        return jsonify({"success": True, "reply": assistant.analyze()})
