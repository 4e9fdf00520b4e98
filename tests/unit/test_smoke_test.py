# tests/unit/test_smoke_test.py

from unittest.mock import MagicMock, patch

import pytest

from smoke_test import Config, SmokeTestRunner


@pytest.fixture
def runner_factory():
    def _make(slack_token=None) -> SmokeTestRunner:
        config = Config(function_name="fn", bucket="b", slack_token=slack_token)
        with patch("smoke_test.boto3.client", return_value=MagicMock()):
            return SmokeTestRunner(config)

    return _make


def test_wrong_token_check_is_skipped_without_token(runner_factory):
    runner = runner_factory()
    runner._invoke = MagicMock()

    result = runner._check_rejects_wrong_token()

    assert result["status"] == "SKIP"
    runner._invoke.assert_not_called()


def test_skipped_check_does_not_fail_the_run(runner_factory):
    runner = runner_factory()
    runner._verify_aws_connectivity = MagicMock()
    runner._check_writes_object = MagicMock(
        return_value={"name": "write", "status": "PASS", "details": ""}
    )
    runner.console = MagicMock()

    assert runner.run() == 0


def test_failed_check_fails_the_run(runner_factory):
    runner = runner_factory(slack_token="ABC")
    runner._verify_aws_connectivity = MagicMock()
    runner._invoke = MagicMock(return_value={"statusCode": 200, "body": "{}"})
    runner._check_writes_object = MagicMock(
        return_value={"name": "write", "status": "PASS", "details": ""}
    )
    runner.console = MagicMock()

    assert runner.run() == 1
