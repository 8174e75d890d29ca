"""Small helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.enums import PersonType
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(view):
    """Map domain errors to JSON responses: 400 / 404 / 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return json_error("Internal server error", 500)

    return wrapper


def request_json() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_person_type(value: Optional[str], default: PersonType = PersonType.STUDENT) -> PersonType:
    if not value:
        return default
    try:
        return PersonType(value.strip().upper())
    except ValueError:
        raise ValidationError("type must be STUDENT or TEACHER") from None
