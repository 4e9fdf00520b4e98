"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import uuid
from unittest.mock import MagicMock

import pytest

from slack_s3_writer.config import AppConfig


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "slack-s3-writer-test")
    os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "INFO")
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
    os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
    yield
    os.environ.clear()
    os.environ.update(original)


# ---------- Minimal, realistic dummy events ---------- #
def make_api_gateway_event(body: str | None) -> dict:
    """A LAMBDA-PROXY event as API Gateway delivers a Slack slash command."""
    return {
        "resource": "/write",
        "path": "/write",
        "httpMethod": "POST",
        "headers": {
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": "Slackbot 1.0 (+https://api.slack.com/robots)",
        },
        "queryStringParameters": None,
        "requestContext": {
            "requestId": str(uuid.uuid4()),
            "stage": "dev",
        },
        "body": body,
        "isBase64Encoded": False,
    }


@pytest.fixture
def slack_event() -> dict:
    """A slash command carrying the configured token."""
    return make_api_gateway_event(
        "token=ABC&team_domain=example&user_name=alice&command=%2Fwrite&text=hi"
    )


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        bucket="test-bucket",
        slack_token="ABC",
        service_name="slack-s3-writer-test",
        environment="test",
        log_level="INFO",
    )


@pytest.fixture
def lambda_context() -> MagicMock:
    """A stand-in for the LambdaContext object."""
    context = MagicMock()
    context.function_name = "slack-s3-writer"
    context.function_version = "$LATEST"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = (
        "arn:aws:lambda:eu-west-1:000000000000:function:slack-s3-writer"
    )
    context.aws_request_id = "req-" + uuid.uuid4().hex
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def make_event():
    """Factory fixture for events with an arbitrary body."""
    return make_api_gateway_event
