"""Protocol interfaces for every remote capability hostingkit talks to.

Components receive these at construction time; the process entry point
owns the concrete boto3 clients. Structural typing keeps test doubles
free of inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hostingkit.core.types import BucketName, ExecutionId, ParameterKey, PipelineName
from hostingkit.models.identity import CallerIdentity
from hostingkit.models.pipeline import StageState


# ---------------------------------------------------------------------------
# Parameter store
# ---------------------------------------------------------------------------

@runtime_checkable
class IParameterReader(Protocol):
    """Hierarchical key/value reads. Returns None when the key has no value."""

    def get_parameter(self, key: ParameterKey) -> str | None: ...


# ---------------------------------------------------------------------------
# Pipeline control plane
# ---------------------------------------------------------------------------

@runtime_checkable
class IPipelineControl(Protocol):
    """Deployment pipeline state reads and execution starts."""

    def describe_stages(self, pipeline_name: PipelineName) -> list[StageState]: ...

    def start_execution(
        self, pipeline_name: PipelineName, client_request_token: str | None = None
    ) -> ExecutionId: ...


# ---------------------------------------------------------------------------
# Identity / session
# ---------------------------------------------------------------------------

@runtime_checkable
class IIdentityService(Protocol):
    """Caller identity check against the control plane."""

    def who_am_i(self) -> CallerIdentity: ...

    def current_region(self) -> str | None: ...


# ---------------------------------------------------------------------------
# Bucket existence
# ---------------------------------------------------------------------------

@runtime_checkable
class IBucketProbe(Protocol):
    """Create-vs-reuse predicate for storage buckets."""

    def exists(self, bucket_name: BucketName) -> bool: ...
