# In src/slack_s3_writer/schemas.py

import base64
import binascii
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field

# --- Static Type Hinting (for mypy and IDEs) ---


class HttpResponse(TypedDict):
    """The LAMBDA-PROXY response shape returned to API Gateway."""

    statusCode: int
    body: str


# --- Runtime Validation (using Pydantic) ---


class InboundEvent(BaseModel):
    """
    Pydantic model for the HTTP-triggered event envelope.

    Only ``body`` is interpreted; every other key (headers, path,
    requestContext, ...) is kept as-is in the model's extra fields.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    body: str | None = None
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")

    def decoded_body(self) -> str:
        """Returns the textual body, undoing API Gateway's base64 wrapping."""
        if self.body is None:
            return ""
        if not self.is_base64_encoded:
            return self.body
        try:
            return base64.b64decode(self.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"Body is not valid base64-encoded UTF-8: {e}") from e


class SlackCommandForm(BaseModel):
    """
    The form-urlencoded payload Slack posts for a slash command.

    ``token`` is the only field that takes part in verification; the rest are
    used for log context. Build it with ``security.parse_slack_form`` so that
    a repeated known field is treated as absent and an ambiguous token never
    matches.
    """

    model_config = ConfigDict(extra="allow")

    token: str | None = None
    team_domain: str | None = None
    user_name: str | None = None
    command: str | None = None
    text: str | None = None

    def log_context(self) -> dict[str, Any]:
        return {
            "team_domain": self.team_domain,
            "user_name": self.user_name,
            "command": self.command,
        }
