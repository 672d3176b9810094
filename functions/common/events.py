"""Request body decoding shared by the handlers."""

import json
from typing import Any


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {constant}")


def parse_json(raw: str) -> Any:
    """Decode strict JSON text. NaN, Infinity and -Infinity are rejected."""
    return json.loads(raw, parse_constant=_reject_constant)


def parse_body(raw: str | None) -> dict[str, Any]:
    """
    Decode an event body into a request object.

    A missing or empty body is an empty request, and so is a JSON value that
    is not an object. A JSON null body is an error.
    """
    if not raw:
        return {}
    body = parse_json(raw)
    if body is None:
        raise TypeError("Request body must not be null")
    if not isinstance(body, dict):
        return {}
    return body


def is_blank(value: Any) -> bool:
    """True for the JSON values that count as no value: null, false, 0 and ""."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value == 0
    return False


def name_or_default(body: dict[str, Any], default: str) -> Any:
    name = body.get("name")
    return default if is_blank(name) else name
