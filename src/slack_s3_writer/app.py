"""
The Lambda Adapter for the Slack S3 Writer service.

This module is the main entry point for the AWS Lambda function. It is
responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer and
    Metrics).
2.  Building the process-wide S3 client and RequestHandler once per
    execution environment, with the configuration injected.
3.  Delegating each API Gateway (LAMBDA-PROXY) invocation to the handler and
    recording the outcome as a metric.
"""

from typing import Any

import boto3
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .clients import S3Client
from .config import get_config
from .core import Outcome, RequestHandler
from .schemas import HttpResponse

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace="SlackS3Writer",
    service=CONFIG.service_name,
)

s3_boto_client = boto3.client("s3")
s3_client = S3Client(s3_client=s3_boto_client)

request_handler = RequestHandler(config=CONFIG, s3_client=s3_client)

OUTCOME_METRICS = {
    Outcome.UNAUTHORIZED: "UnauthorizedRequests",
    Outcome.WRITTEN: "ObjectsWritten",
    Outcome.WRITE_FAILED: "ObjectWriteFailures",
}


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: dict[str, Any], context: LambdaContext) -> HttpResponse:
    """Main Lambda handler for HTTP-triggered invocations."""
    metrics.add_dimension("environment", CONFIG.environment)
    logger.info(
        "Received request",
        extra={
            "token_verification": CONFIG.verify_token,
            "request_id": context.aws_request_id,
        },
    )

    result = request_handler.process(event)

    metrics.add_metric(
        name=OUTCOME_METRICS[result.outcome], unit=MetricUnit.Count, value=1
    )
    logger.info(
        "Request completed",
        extra={
            "outcome": result.outcome.value,
            "status_code": result.response["statusCode"],
        },
    )
    return result.response
