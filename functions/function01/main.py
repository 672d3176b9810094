"""Lambda handler for function-01 - statically typed greeting endpoint."""

from typing import Any

import structlog
from aws_lambda_powertools.utilities.typing import LambdaContext

from common.config import get_settings
from common.events import name_or_default, parse_body
from common.logging import configure_logging, describe_context, invocation_context
from common.responses import ProxyResult, internal_error, ok, utc_timestamp

DEFAULT_NAME = "World"
UNKNOWN_ERROR = "Unknown error"

settings = get_settings()
configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


def render_name(value: Any) -> str:
    """
    Render a decoded JSON value as greeting text.

    Booleans render as true/false, arrays as their comma-joined elements
    (null elements render empty), objects as "[object Object]", and integral
    floats without a fractional part.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(render_name(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def resolve_name(body: dict[str, Any]) -> str:
    return render_name(name_or_default(body, DEFAULT_NAME))


def handler(event: dict[str, Any], context: LambdaContext) -> ProxyResult:
    """AWS Lambda handler for API Gateway proxy integration."""
    with invocation_context(context):
        logger.info("Event received", payload=event)
        logger.info("Invocation context", context=describe_context(context))

        try:
            body = parse_body(event.get("body"))
            name = resolve_name(body)

            current_time = utc_timestamp()

            return ok(
                {
                    "message": f"Hello {name} from TypeScript Lambda!",
                    "timestamp": current_time,
                    "requestId": context.aws_request_id,
                    "functionName": context.function_name,
                }
            )
        except Exception as e:
            logger.error("Error handling request", error=str(e), exc_info=True)
            return internal_error(str(e) or UNKNOWN_ERROR)
