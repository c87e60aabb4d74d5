"""Integration test fixtures: LocalStack SSM."""

from __future__ import annotations

import os

import boto3
import pytest

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "us-east-1"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("ssm", region_name=REGION, endpoint_url=LOCALSTACK_URL)
        client.describe_parameters(MaxResults=1)
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_ssm():
    """SSM client pointing at LocalStack."""
    return boto3.client("ssm", region_name=REGION, endpoint_url=LOCALSTACK_URL)
