from __future__ import annotations

import logging
from typing import Any

from flask import jsonify, request

from ..core.exceptions import ConflictError, DomainError, NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: 422,
    ConflictError: 409,
    NotFoundError: 404,
    PersistenceError: 503,
}


def ok(data: Any = None, status: int = 200):
    return jsonify({"ok": True, "data": data}), status


def fail(e: DomainError):
    status = next((code for cls, code in STATUS_BY_ERROR.items() if isinstance(e, cls)), 400)
    return jsonify({"ok": False, "error": e.kind, "message": str(e)}), status


def server_error(e: Exception, *, debug: bool = False):
    logger.exception("Unhandled error")
    message = f"Internal error: {e}" if debug else "Internal error"
    return jsonify({"ok": False, "error": "internal-error", "message": message}), 500


def request_payload() -> dict:
    """JSON object body, or form fields when the request has no JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
