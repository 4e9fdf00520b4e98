# src/slack_s3_writer/exceptions.py

"""
Shared custom exceptions for the Slack S3 Writer service.

Centralizing exception definitions in a separate module prevents circular
import errors between other modules that need to raise or catch them.

Exception Hierarchy:
- SlackS3WriterError (base)
  - AuthorizationError
  - StorageWriteError
  - ValidationError
    - InvalidEventError
  - ConfigurationError
"""

from typing import Any, Dict, Optional


class SlackS3WriterError(Exception):
    """Base exception for all Slack S3 Writer service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}  # Copy context to prevent mutation
        self.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "correlation_id": self.correlation_id,
        }


class AuthorizationError(SlackS3WriterError):
    """Raised when a request does not carry the expected Slack token."""

    def __init__(self, message: str = "Request token did not match", **kwargs):
        if 'error_code' not in kwargs:
            kwargs['error_code'] = "UNAUTHORIZED_REQUEST"
        super().__init__(message, **kwargs)


class StorageWriteError(SlackS3WriterError):
    """Raised when writing an object to S3 fails for any reason."""

    def __init__(self, bucket: Optional[str], key: str, reason: str, **kwargs):
        message = f"Failed to write s3://{bucket or '<unset>'}/{key}: {reason}"
        # Start with provided context, then add our default context
        context = {}
        if 'context' in kwargs:
            context.update(kwargs.pop('context'))
        context.update({"bucket": bucket, "key": key, "reason": reason})
        if 'error_code' not in kwargs:
            kwargs['error_code'] = "S3_WRITE_FAILED"
        super().__init__(message, context=context, **kwargs)
        self.bucket = bucket
        self.key = key
        self.reason = reason


# === Validation Errors ===

class ValidationError(SlackS3WriterError):
    """Base class for validation errors."""
    pass


class InvalidEventError(ValidationError):
    """Raised when the inbound event envelope is malformed."""

    def __init__(self, message: str, **kwargs):
        # Don't override error_code if it's already provided in kwargs
        if 'error_code' not in kwargs:
            kwargs['error_code'] = "INVALID_EVENT"
        super().__init__(message, **kwargs)


# === Configuration Errors ===

class ConfigurationError(SlackS3WriterError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===

def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, SlackS3WriterError):
        return error.to_dict()
    else:
        return {
            "error_type": error.__class__.__name__,
            "message": str(error),
        }
