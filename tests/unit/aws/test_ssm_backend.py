"""Unit tests for SSMParameterReader using moto."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from moto import mock_aws

from hostingkit.aws.ssm_backend import SSMParameterReader
from hostingkit.core.exceptions import ConfigLookupError

REGION = "us-east-1"
KEY = "/hosting-connection-acme-site-main-0a1b2c3d/pipeline-name"


@pytest.fixture
def ssm():
    with mock_aws():
        yield boto3.client("ssm", region_name=REGION)


class TestGetParameter:
    def test_returns_value(self, ssm):
        ssm.put_parameter(Name=KEY, Value="acme-site-main", Type="String")
        assert SSMParameterReader(region=REGION).get_parameter(KEY) == "acme-site-main"

    def test_missing_parameter_is_none(self, ssm):
        assert SSMParameterReader(region=REGION).get_parameter(KEY) is None

    def test_access_denied_raises_lookup_error(self):
        client = MagicMock()
        client.get_parameter.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "denied"}}, "GetParameter",
        )
        with patch("boto3.client", return_value=client):
            reader = SSMParameterReader(region=REGION)
        with pytest.raises(ConfigLookupError) as info:
            reader.get_parameter(KEY)
        assert info.value.parameter_key == KEY
        assert isinstance(info.value.__cause__, ClientError)

    def test_transport_failure_raises_lookup_error(self):
        client = MagicMock()
        client.get_parameter.side_effect = EndpointConnectionError(endpoint_url="https://ssm.invalid")
        with patch("boto3.client", return_value=client):
            reader = SSMParameterReader(region=REGION)
        with pytest.raises(ConfigLookupError):
            reader.get_parameter(KEY)
