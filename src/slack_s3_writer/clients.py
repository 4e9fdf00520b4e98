# src/slack_s3_writer/clients.py

"""
Client wrapper for interacting with Amazon S3.

This class provides a small, typed interface over a raw boto3 client so the
request handling logic never deals with botocore exceptions directly: every
failure of a write is reported as a StorageWriteError.
"""

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import StorageWriteError

if TYPE_CHECKING:
    from mypy_boto3_s3.client import S3Client as S3ClientType

logger = logging.getLogger(__name__)


class S3Client:
    """
    A wrapper for the S3 client operations the writer needs.
    """

    def __init__(self, s3_client: "S3ClientType"):
        """
        Initializes the S3Client.

        Args:
            s3_client: A typed boto3 S3 client.
        """
        self._client = s3_client

    def put_text_object(self, bucket: str | None, key: str, body: str) -> dict[str, Any]:
        """
        Writes ``body`` to ``s3://bucket/key`` with a single PutObject call,
        overwriting any existing object.

        Returns the PutObject response (ETag, VersionId, ...) without boto's
        ``ResponseMetadata`` envelope. Raises StorageWriteError on any failure.
        """
        logger.info("Writing object", extra={"bucket": bucket, "key": key})

        params: dict[str, Any] = {"Key": key, "Body": body}
        # An unset bucket is left to boto's own parameter validation.
        if bucket is not None:
            params["Bucket"] = bucket

        try:
            response = self._client.put_object(**params)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            error_message = e.response["Error"]["Message"]
            raise StorageWriteError(
                bucket=bucket,
                key=key,
                reason=str(e),
                context={
                    "aws_error_code": error_code,
                    "aws_error_message": error_message,
                },
            ) from e
        except BotoCoreError as e:
            # Parameter validation (e.g. a missing bucket), connection errors,
            # timeouts and missing credentials all land here.
            raise StorageWriteError(
                bucket=bucket,
                key=key,
                reason=str(e),
                error_code="S3_CLIENT_FAILURE",
                context={"botocore_error": type(e).__name__},
            ) from e

        metadata = {k: v for k, v in response.items() if k != "ResponseMetadata"}
        logger.debug(
            "Write (PUT) completed successfully",
            extra={"bucket": bucket, "key": key, "etag": metadata.get("ETag")},
        )
        return metadata
