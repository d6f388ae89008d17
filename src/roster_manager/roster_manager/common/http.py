from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import DomainError, DuplicateWarning, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_errors(view):
    """Map domain errors raised by a view to ``{"success": false}`` JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DuplicateWarning as e:
            return jsonify({"success": False, "message": str(e), "duplicate": True, "count": e.count}), 409
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except DomainError as e:
            logger.warning("request failed: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

    return wrapper


def json_body() -> dict:
    """Request JSON as a dict; anything that is not a JSON object reads as empty."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}
