"""Pytest configuration for the Lambda handler tests."""

import json
from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    """Stand-in for the context object the Lambda runtime passes to handlers."""

    function_name: str = "function-01"
    function_version: str = "$LATEST"
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:function-01"
    memory_limit_in_mb: str = "128"
    aws_request_id: str = "c6af9ac6-7b61-11e6-9a41-93e812345678"
    log_group_name: str = "/aws/lambda/function-01"
    log_stream_name: str = "2026/10/19/[$LATEST]abcdef0123456789"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def make_event():
    """Build an API Gateway proxy event; a dict body is serialized to JSON."""

    def _make(body=None, omit_body=False):
        event = {
            "httpMethod": "POST",
            "path": "/hello",
            "headers": {"Content-Type": "application/json"},
        }
        if not omit_body:
            event["body"] = json.dumps(body) if isinstance(body, dict) else body
        return event

    return _make
