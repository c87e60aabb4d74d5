"""Unit tests for the S3 bucket probes using moto."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from hostingkit.aws.s3_backend import S3BucketProbe, StrictS3BucketProbe
from hostingkit.core.exceptions import BucketProbeError

BUCKET = "acme-site-assets"


@pytest.fixture
def s3():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture
def throttled_client():
    client = MagicMock()
    client.head_bucket.side_effect = ClientError(
        {"Error": {"Code": "SlowDown", "Message": "slow down"}}, "HeadBucket",
    )
    return client


class TestS3BucketProbe:
    def test_existing_bucket(self, s3):
        assert S3BucketProbe(region="us-east-1").exists(BUCKET) is True

    def test_missing_bucket(self, s3):
        assert S3BucketProbe(region="us-east-1").exists("no-such-bucket") is False

    def test_any_error_reads_as_absent(self, throttled_client):
        with patch("boto3.client", return_value=throttled_client):
            probe = S3BucketProbe(region="us-east-1")
        assert probe.exists(BUCKET) is False


class TestStrictS3BucketProbe:
    def test_existing_bucket(self, s3):
        assert StrictS3BucketProbe(region="us-east-1").exists(BUCKET) is True

    def test_missing_bucket(self, s3):
        assert StrictS3BucketProbe(region="us-east-1").exists("no-such-bucket") is False

    def test_other_errors_raise(self, throttled_client):
        with patch("boto3.client", return_value=throttled_client):
            probe = StrictS3BucketProbe(region="us-east-1")
        with pytest.raises(BucketProbeError):
            probe.exists(BUCKET)
