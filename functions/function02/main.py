"""Lambda handler for function-02 - greeting endpoint with simulated async processing."""

import asyncio

import structlog

from common.config import get_settings
from common.events import name_or_default, parse_body
from common.logging import configure_logging, describe_context, invocation_context
from common.responses import internal_error, ok, utc_timestamp

PROCESSING_DELAY_SECONDS = 0.1

settings = get_settings()
configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


def handler(event, context):
    """AWS Lambda handler for API Gateway proxy integration."""
    with invocation_context(context):
        return asyncio.run(handle(event, context))


async def handle(event, context):
    logger.info("Event received", payload=event)
    logger.info("Invocation context", context=describe_context(context))

    try:
        body = parse_body(event.get("body"))
        name = name_or_default(body, "World")

        current_time = utc_timestamp()

        # Simulate some async processing
        processed = await process_request(name)

        response = {
            "message": f"Hello {processed} from JavaScript Lambda!",
            "timestamp": current_time,
            "functionName": context.function_name,
            "memoryLimit": context.memory_limit_in_mb,
        }

        # The Lambda context has no request_id; the field is left out when absent
        request_id = getattr(context, "request_id", None)
        if request_id is not None:
            response["requestId"] = request_id

        return ok(response)
    except Exception as e:
        logger.error("Error handling request", error=str(e), exc_info=True)
        return internal_error(str(e))


async def process_request(name):
    """Wait out the simulated processing delay, then upper-case the name."""
    await asyncio.sleep(PROCESSING_DELAY_SECONDS)
    return name.upper()
