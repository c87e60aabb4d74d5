"""boto3 client construction shared by the backends."""

from __future__ import annotations

from typing import Any

import boto3


def make_client(service: str, region: str | None = None,
                endpoint_url: str | None = None, profile: str | None = None) -> Any:
    """Create a boto3 client, honouring optional region/endpoint/profile overrides."""
    kwargs: dict = {}
    if region:
        kwargs["region_name"] = region
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    if profile:
        return boto3.session.Session(profile_name=profile).client(service, **kwargs)
    return boto3.client(service, **kwargs)
