"""boto3-backed implementations of the hostingkit capability protocols."""

from __future__ import annotations

from typing import NamedTuple

from hostingkit.aws.codepipeline_backend import CodePipelineControl
from hostingkit.aws.s3_backend import S3BucketProbe, StrictS3BucketProbe
from hostingkit.aws.ssm_backend import SSMParameterReader
from hostingkit.aws.sts_backend import STSIdentityService
from hostingkit.core.config import AppSettings
from hostingkit.core.protocols import IBucketProbe, IIdentityService, IParameterReader, IPipelineControl


class AwsClients(NamedTuple):
    parameters: IParameterReader
    pipelines: IPipelineControl
    identity: IIdentityService
    buckets: IBucketProbe


def create_clients(settings: AppSettings | None = None, strict_bucket_probe: bool = False) -> AwsClients:
    """Create wired-up AWS backends from application settings."""
    if settings is None:
        settings = AppSettings()

    conn = {
        "region": settings.aws.region,
        "endpoint_url": settings.aws.endpoint_url,
        "profile": settings.aws.profile,
    }
    probe_cls = StrictS3BucketProbe if strict_bucket_probe else S3BucketProbe

    return AwsClients(
        parameters=SSMParameterReader(**conn),
        pipelines=CodePipelineControl(**conn),
        identity=STSIdentityService(**conn),
        buckets=probe_cls(**conn),
    )
