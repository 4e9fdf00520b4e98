"""
Security utilities for the Slack S3 Writer service.

This module parses the form-urlencoded body Slack posts to the function and
verifies the shared-secret token it carries. Verification is a plain exact
equality check against the configured secret, evaluated in constant time.
"""

import hmac
import urllib.parse

from .schemas import SlackCommandForm

FormValue = str | list[str]


def parse_form_body(body: str) -> dict[str, FormValue]:
    """
    Parse a ``key=value&...`` body.

    Keys that appear once map to a string, keys that are repeated map to the
    list of their values in order. Blank values are kept.

    Examples:
        >>> parse_form_body("token=ABC&text=hi")
        {'token': 'ABC', 'text': 'hi'}

        >>> parse_form_body("token=A&token=B")
        {'token': ['A', 'B']}
    """
    parsed = urllib.parse.parse_qs(body, keep_blank_values=True)
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in parsed.items()
    }


def parse_slack_form(body: str) -> SlackCommandForm:
    """Parse a slash-command body, dropping known fields that were repeated."""
    fields = parse_form_body(body)
    known = SlackCommandForm.model_fields.keys()
    cleaned = {
        key: value
        for key, value in fields.items()
        if key not in known or isinstance(value, str)
    }
    return SlackCommandForm.model_validate(cleaned)


def is_valid_slack_token(provided: object, expected: str) -> bool:
    """
    Returns True only when ``provided`` is a string exactly equal to ``expected``.
    """
    if not isinstance(provided, str) or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
