# sitebuilder/utils/validation.py
import json
import math
from typing import Any, Dict, Mapping, Optional

from flask import request

from sitebuilder.domain.exceptions import ValidationError, field_error

# Sort keys live in a 32-bit signed INTEGER column
SORT_KEY_MIN = -(2 ** 31)
SORT_KEY_MAX = 2 ** 31 - 1


def request_body() -> Dict[str, Any]:
    """JSON body of the current request; anything but an object is rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (dict, list)):
        return not value
    return False


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False
    return math.isfinite(number)


def is_sort_key(value: Any) -> bool:
    """Integral number that fits the order column."""
    if not is_numeric(value):
        return False
    number = float(value)
    return number.is_integer() and SORT_KEY_MIN <= number <= SORT_KEY_MAX


def validate_body(
    data: Mapping[str, Any],
    *,
    required: Optional[Dict[str, str]] = None,
    numeric: Optional[Dict[str, str]] = None,
) -> None:
    """
    Collect every failing field before rejecting the request.

    `required` and `numeric` map a field name to the message reported for it.
    """
    errors = []

    for field, msg in (required or {}).items():
        if is_blank(data.get(field)):
            errors.append(field_error(field, msg))

    for field, msg in (numeric or {}).items():
        if not is_numeric(data.get(field)):
            errors.append(field_error(field, msg))

    if errors:
        raise ValidationError("Validation failed", errors=errors)


def parse_json_field(value: Any, field_name: str) -> Any:
    """Accept an already-parsed JSON value or a serialized JSON string."""
    if not isinstance(value, str):
        return value

    try:
        return json.loads(value)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid JSON in {field_name}",
            errors=[field_error(field_name, f"Invalid JSON in {field_name}")]
        ) from exc


def parse_json_object(value: Any, field_name: str) -> Dict[str, Any]:
    parsed = parse_json_field(value, field_name)
    if not isinstance(parsed, dict):
        raise ValidationError(
            f"{field_name} must be a JSON object",
            errors=[field_error(field_name, f"{field_name} must be a JSON object")]
        )
    return parsed


def as_int(value: Any) -> int:
    return int(float(value))


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)

