from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_errors
from ..common.validators import optional_text
from ..container import Container, build_remote

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    gateway = container.gateway

    @app.route("/api/settings/remote", methods=["GET"], endpoint="settings_remote")
    def settings_remote():
        remote = gateway.remote
        return jsonify({"success": True, "url": getattr(remote, "url", "") if remote else ""})

    @app.route("/api/settings/remote", methods=["PUT"], endpoint="settings_remote_update")
    @json_errors
    def settings_remote_update():
        url = optional_text(json_body().get("url"), "Url")
        gateway.set_remote(build_remote(url, timeout=container.remote_timeout))
        logger.info("remote sync %s", "enabled" if url else "disabled")
        return jsonify({"success": True, "url": url})
