"""
Structured logging for the Lambda handlers.

Centralized logging setup with:
- Structured JSON output on stdout (picked up by CloudWatch Logs)
- Invocation correlation through structlog contextvars
- A JSON-safe description of the Lambda context
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

# Attributes the Lambda runtime sets on the context object
CONTEXT_ATTRIBUTES = (
    "function_name",
    "function_version",
    "invoked_function_arn",
    "memory_limit_in_mb",
    "aws_request_id",
    "log_group_name",
    "log_stream_name",
)


def configure_logging(service_name: str, level: str = "info") -> None:
    """
    Configure structured logging for a handler.

    Args:
        service_name: Name of the function for log context
        level: Minimum level name, case-insensitive (LOG_LEVEL)
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # The Lambda runtime installs its own root handler, so basicConfig may be a
    # no-op there; the level still has to be applied explicitly.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def describe_context(context: Any) -> dict[str, Any]:
    """Return the runtime-supplied attributes of a Lambda context."""
    return {
        name: getattr(context, name)
        for name in CONTEXT_ATTRIBUTES
        if getattr(context, name, None) is not None
    }


@contextmanager
def invocation_context(context: Any) -> Iterator[None]:
    """Bind the invocation identifiers to every log line emitted inside."""
    with structlog.contextvars.bound_contextvars(
        aws_request_id=getattr(context, "aws_request_id", None),
        function_name=getattr(context, "function_name", None),
    ):
        yield
