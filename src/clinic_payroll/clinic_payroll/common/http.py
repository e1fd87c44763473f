from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import ConfigurationError, DuplicateRecordError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (DuplicateRecordError, 409),
    (ConfigurationError, 422),
)


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def json_endpoint(view):
    """Wrap a view returning data (or (data, status)) into the JSON envelope.

    Domain errors become ``{"success": false, "message": ...}`` with a matching
    status code; anything else is logged and reported as a 500.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            result = view(*args, **kwargs)
        except (ValidationError, DuplicateRecordError, ConfigurationError) as e:
            status = next(code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls))
            return jsonify({"success": False, "message": str(e)}), status
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Internal server error"}), 500

        status = 200
        if isinstance(result, tuple):
            result, status = result
        return jsonify({"success": True, "data": to_jsonable(result)}), status

    return wrapper


def request_json() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
