"""In-memory backends for unit tests: dict-backed fakes."""

from __future__ import annotations

from hostingkit.core.exceptions import ConnectivityError, TriggerExecutionError
from hostingkit.models.identity import CallerIdentity
from hostingkit.models.pipeline import StageState


class MemoryParameterReader:
    """Dict-backed IParameterReader for unit tests."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self.reads: list[str] = []

    def get_parameter(self, key: str) -> str | None:
        self.reads.append(key)
        return self._values.get(key)


class MemoryPipelineControl:
    """Canned-state IPipelineControl that records start requests."""

    def __init__(self) -> None:
        self._stages: dict[str, list[StageState]] = {}
        self.start_calls: list[tuple[str, str | None]] = []
        self.start_attempts = 0
        self.fail_start = False

    def set_stages(self, pipeline_name: str, stages: list[tuple[str, str | None]]) -> None:
        self._stages[pipeline_name] = [
            StageState(stage_name=name, latest_execution_status=status) for name, status in stages
        ]

    def describe_stages(self, pipeline_name: str) -> list[StageState]:
        return list(self._stages.get(pipeline_name, []))

    def start_execution(self, pipeline_name: str, client_request_token: str | None = None) -> str:
        self.start_attempts += 1
        if self.fail_start:
            raise TriggerExecutionError(pipeline_name, "start rejected")
        self.start_calls.append((pipeline_name, client_request_token))
        return f"exec-{len(self.start_calls)}"


class MemoryIdentityService:
    """IIdentityService that either succeeds with a fixed identity or fails."""

    def __init__(self, identity: CallerIdentity | None = None, region: str | None = "us-east-1") -> None:
        self._identity = identity
        self._region = region
        self.calls = 0

    def who_am_i(self) -> CallerIdentity:
        self.calls += 1
        if self._identity is None:
            raise ConnectivityError("no credentials")
        return self._identity

    def current_region(self) -> str | None:
        return self._region


class MemoryBucketProbe:
    """Set-backed IBucketProbe for unit tests."""

    def __init__(self, buckets: set[str] | None = None) -> None:
        self._buckets = set(buckets or ())

    def exists(self, bucket_name: str) -> bool:
        return bucket_name in self._buckets
