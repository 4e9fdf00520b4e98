# src/slack_s3_writer/core.py

"""
Core request handling for the Slack S3 Writer service.

The RequestHandler turns one inbound HTTP event into one HTTP-shaped response.
Per invocation it:
1.  Checks the event is a JSON object. Nothing else in it is interpreted
    unless a token is configured.
2.  Verifies the Slack token in the form-encoded body, when a token is
    configured, and answers 403 straight away on a mismatch. A body that
    is not text counts as a mismatch.
3.  Writes the fixed test object to the configured bucket.
4.  Answers 200 with a message describing the write and an echo of the event.

Storage failures are never surfaced as an error status: they are logged and
described in the 200 response's message.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pydantic

from .clients import S3Client
from .config import AppConfig
from .exceptions import (
    AuthorizationError,
    InvalidEventError,
    StorageWriteError,
    get_error_context,
)
from .schemas import HttpResponse, InboundEvent
from .security import is_valid_slack_token, parse_slack_form

logger = logging.getLogger(__name__)

OBJECT_KEY = "testFile.txt"
OBJECT_BODY = "I am a test text file"
UNAUTHORIZED_MESSAGE = "Sorry but you are not Slack"


def _dumps(payload: Any) -> str:
    """Compact JSON, the same layout JSON.stringify produces."""
    return json.dumps(payload, separators=(",", ":"), default=str)


def build_response(status_code: int, payload: dict[str, Any]) -> HttpResponse:
    return {"statusCode": status_code, "body": _dumps(payload)}


def require_mapping(event: Any) -> dict[str, Any]:
    """Raises InvalidEventError unless the event is a JSON object."""
    if not isinstance(event, dict):
        raise InvalidEventError(
            "Inbound event must be a JSON object",
            context={"event_type": type(event).__name__},
        )
    return event


def parse_event(event: Any) -> InboundEvent:
    """Validates the event envelope, raising InvalidEventError if malformed."""
    require_mapping(event)
    try:
        return InboundEvent.model_validate(event)
    except pydantic.ValidationError as e:
        raise InvalidEventError(
            "Inbound event failed validation",
            context={
                "validation_errors": [
                    {"loc": err["loc"], "type": err["type"]} for err in e.errors()
                ]
            },
        ) from e


class Outcome(str, Enum):
    UNAUTHORIZED = "unauthorized"
    WRITTEN = "written"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class InvocationResult:
    outcome: Outcome
    response: HttpResponse


class RequestHandler:
    """Handles one HTTP-triggered invocation against an injected configuration."""

    def __init__(self, config: AppConfig, s3_client: S3Client):
        self._config = config
        self._s3_client = s3_client

    def authorize(self, event: dict[str, Any]) -> None:
        """Raises AuthorizationError unless the body's token matches the secret."""
        try:
            inbound = parse_event(event)
        except InvalidEventError as e:
            raise AuthorizationError(
                "Request body is not form-encoded text", context=e.context
            ) from e

        try:
            body = inbound.decoded_body()
        except ValueError as e:
            raise AuthorizationError(
                "Request body could not be decoded", context={"reason": str(e)}
            ) from e

        form = parse_slack_form(body)
        if not is_valid_slack_token(form.token, self._config.slack_token or ""):
            raise AuthorizationError(context=form.log_context())

        logger.info("Slack token verified", extra=form.log_context())

    def write_object(self) -> tuple[Outcome, str]:
        """Writes the fixed object and returns the outcome with a message describing it."""
        bucket = self._config.bucket
        try:
            metadata = self._s3_client.put_text_object(
                bucket=bucket, key=OBJECT_KEY, body=OBJECT_BODY
            )
        except StorageWriteError as e:
            logger.exception(
                "Failed to write object to S3", extra={"error": get_error_context(e)}
            )
            return Outcome.WRITE_FAILED, f"Something went wrong {e}"

        return Outcome.WRITTEN, f"Wrote successfully to {bucket} {_dumps(metadata)}"

    def process(self, event: dict[str, Any]) -> InvocationResult:
        """
        Produces the response for one inbound event, along with its outcome.

        Returns 403 without touching storage when the token check fails, and
        200 otherwise, whether or not the write succeeded.
        """
        require_mapping(event)

        if self._config.verify_token:
            try:
                self.authorize(event)
            except AuthorizationError as e:
                logger.warning(
                    "Rejected request with an invalid Slack token",
                    extra={"error": get_error_context(e)},
                )
                return InvocationResult(
                    Outcome.UNAUTHORIZED,
                    build_response(403, {"errorMessage": UNAUTHORIZED_MESSAGE}),
                )

        outcome, message = self.write_object()
        return InvocationResult(
            outcome, build_response(200, {"message": message, "input": event})
        )

    def handle(self, event: dict[str, Any]) -> HttpResponse:
        return self.process(event).response
