from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Tuple

from flask import Response, jsonify

from ..core.exceptions import InvalidStateError, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def json_safe(value: Any) -> Any:
    """Turn dataclasses, dates, decimals and enums into JSON-friendly values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: json_safe(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def ok(payload: Any = None, status: int = 200) -> Tuple[Response, int]:
    body = {"success": True}
    if payload is not None:
        body.update(json_safe(payload))
    return jsonify(body), status


def error_response(exc: Exception, *, debug: bool = False) -> Tuple[Response, int]:
    if isinstance(exc, NotFoundError):
        return jsonify({"success": False, "message": str(exc)}), 404
    if isinstance(exc, ValidationError):
        return jsonify({"success": False, "message": str(exc), "reason": exc.reason.value, "field": exc.field}), 400
    if isinstance(exc, InvalidStateError):
        return jsonify({"success": False, "message": str(exc)}), 409

    logger.exception("Request failed")
    body = {"success": False, "message": "Internal error"}
    if debug:
        body["message"] = str(exc) if isinstance(exc, StoreError) else f"{type(exc).__name__}: {exc}"
    return jsonify(body), 500
