"""Tests for the shared handler support code."""

import json
import logging
import re

import pytest
import structlog

from common.config import Settings
from common.events import is_blank, name_or_default, parse_body, parse_json
from common.logging import configure_logging, describe_context, invocation_context
from common.responses import internal_error, json_response, ok, utc_timestamp


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("APP_ENV", "LOG_LEVEL", "AWS_LAMBDA_FUNCTION_NAME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.app_env == "production"
        assert settings.log_level == "info"
        assert settings.service_name == "local"

    def test_reads_lambda_environment(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "staging")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "function-01")

        settings = Settings()

        assert settings.app_env == "staging"
        assert settings.log_level == "debug"
        assert settings.service_name == "function-01"


class TestLogging:
    def teardown_method(self) -> None:
        configure_logging("test", "info")

    def test_configure_applies_level(self):
        configure_logging("test", "debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_unknown_level_falls_back_to_info(self):
        configure_logging("test", "verbose")

        assert logging.getLogger().level == logging.INFO

    def test_describe_context_skips_missing_attributes(self, lambda_context):
        lambda_context.log_stream_name = None

        described = describe_context(lambda_context)

        assert described["function_name"] == "function-01"
        assert described["aws_request_id"] == lambda_context.aws_request_id
        assert "log_stream_name" not in described

    def test_invocation_context_binds_identifiers(self, lambda_context):
        with invocation_context(lambda_context):
            bound = structlog.contextvars.get_contextvars()

        assert bound["aws_request_id"] == lambda_context.aws_request_id
        assert bound["function_name"] == "function-01"
        assert "aws_request_id" not in structlog.contextvars.get_contextvars()


class TestResponses:
    def test_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

    def test_payload_serialized_as_given(self):
        response = json_response(200, {"a": 1, "b": None}, {"X": "y"})

        assert json.loads(response["body"]) == {"a": 1, "b": None}
        assert response["headers"] == {"X": "y"}

    def test_ok_envelope(self):
        response = ok({"message": "hi"})

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_internal_error_envelope(self):
        response = internal_error("boom")

        assert response["statusCode"] == 500
        assert "Access-Control-Allow-Origin" not in response["headers"]
        assert json.loads(response["body"]) == {"message": "Internal server error", "error": "boom"}


class TestEvents:
    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", '{"name": NaN}', "[Infinity]"])
    def test_parse_json_rejects_non_json_constants(self, raw):
        with pytest.raises(ValueError, match="Invalid JSON constant"):
            parse_json(raw)

    @pytest.mark.parametrize("raw", [None, "", "[1]", "3", '"text"'])
    def test_parse_body_without_object_is_empty(self, raw):
        assert parse_body(raw) == {}

    def test_parse_body_null_raises(self):
        with pytest.raises(TypeError, match="must not be null"):
            parse_body("null")

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, ""])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", [True, 1, "0", [], {}])
    def test_non_blank_values(self, value):
        assert not is_blank(value)

    def test_name_or_default(self):
        assert name_or_default({}, "World") == "World"
        assert name_or_default({"name": 0}, "World") == "World"
        assert name_or_default({"name": []}, "World") == []
        assert name_or_default({"name": "Ada"}, "World") == "Ada"
