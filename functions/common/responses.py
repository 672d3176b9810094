"""API Gateway proxy response envelopes."""

import json
from datetime import UTC, datetime
from typing import Any, TypedDict

JSON_HEADERS = {"Content-Type": "application/json"}
CORS_HEADERS = {**JSON_HEADERS, "Access-Control-Allow-Origin": "*"}

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ProxyResult(TypedDict):
    statusCode: int
    headers: dict[str, str]
    body: str


def utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC with millisecond precision, e.g. 2026-10-19T12:00:00.123Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_response(status_code: int, payload: dict[str, Any], headers: dict[str, str]) -> ProxyResult:
    return {
        "statusCode": status_code,
        "headers": dict(headers),
        "body": json.dumps(payload, separators=(",", ":"), default=str),
    }


def ok(payload: dict[str, Any]) -> ProxyResult:
    return json_response(200, payload, CORS_HEADERS)


def internal_error(error: str) -> ProxyResult:
    return json_response(
        500,
        {"message": INTERNAL_ERROR_MESSAGE, "error": error},
        JSON_HEADERS,
    )
