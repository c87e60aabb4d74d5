"""Pipeline stage state and aggregate status models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict

UNKNOWN = "Unknown"


class StageStatus(StrEnum):
    """Latest-execution status values reported per stage by CodePipeline."""

    IN_PROGRESS = "InProgress"
    FAILED = "Failed"
    STOPPED = "Stopped"
    STOPPING = "Stopping"
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"


class StageState(BaseModel):
    """One stage of a pipeline as read from the control plane."""

    model_config = ConfigDict(frozen=True)

    stage_name: Optional[str] = None
    # kept as str so status values added to the API later still parse
    latest_execution_status: Optional[str] = None


class AggregateStatus(BaseModel):
    """Single status reduced from all stage states of one pipeline."""

    model_config = ConfigDict(frozen=True)

    status: str = UNKNOWN
    stage_name: str = UNKNOWN

    @property
    def is_in_progress(self) -> bool:
        return self.status == StageStatus.IN_PROGRESS

    @classmethod
    def unknown(cls) -> AggregateStatus:
        return cls(status=UNKNOWN, stage_name=UNKNOWN)


class TriggerResult(BaseModel):
    """Outcome of one start request."""

    pipeline_name: Optional[str] = None
    started: bool
    execution_id: Optional[str] = None
    observed: AggregateStatus

    @property
    def message(self) -> str:
        if self.started:
            return "The pipeline has been started to apply the latest changes."
        return "Pipeline is already in progress."
