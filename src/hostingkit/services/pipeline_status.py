"""Reduce a pipeline's per-stage states to one aggregate status.

Precedence is InProgress, then Failed, then whatever the last reporting
stage said. Something running or broken anywhere in the pipeline matters
more to an operator than the final stage's own status, so a pipeline with
``[source: Succeeded, build: InProgress, deploy: Succeeded]`` reports
``InProgress``.

While anything runs, the reported stage is the last running stage in
pipeline order. Otherwise it is the last stage that has a latest-execution
status at all. Stages that never ran are skipped.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, NamedTuple, Optional

from hostingkit.core.exceptions import ConfigLookupError, PipelineQueryError
from hostingkit.core.protocols import IPipelineControl
from hostingkit.models.parameters import ParameterName
from hostingkit.models.pipeline import UNKNOWN, AggregateStatus, StageState, StageStatus
from hostingkit.services.parameter_store import ParameterStore

logger = logging.getLogger(__name__)


class _Scan(NamedTuple):
    has_in_progress: bool = False
    has_failed: bool = False
    last_status: Optional[str] = None
    last_stage: Optional[str] = None
    last_running_stage: Optional[str] = None


def _step(acc: _Scan, stage: StageState) -> _Scan:
    status = stage.latest_execution_status
    if not status:
        return acc
    name = stage.stage_name or UNKNOWN
    running = status == StageStatus.IN_PROGRESS
    return _Scan(
        has_in_progress=acc.has_in_progress or running,
        has_failed=acc.has_failed or status == StageStatus.FAILED,
        last_status=status,
        last_stage=name,
        last_running_stage=name if running else acc.last_running_stage,
    )


def aggregate_stage_states(stages: Iterable[StageState] | None) -> AggregateStatus:
    """Fold ordered stage states into an AggregateStatus."""
    scan = reduce(_step, stages or (), _Scan())
    stage_name = scan.last_stage or UNKNOWN
    if scan.has_in_progress:
        return AggregateStatus(status=StageStatus.IN_PROGRESS.value, stage_name=scan.last_running_stage)
    if scan.has_failed:
        return AggregateStatus(status=StageStatus.FAILED.value, stage_name=stage_name)
    return AggregateStatus(status=scan.last_status or UNKNOWN, stage_name=stage_name)


class PipelineStatusAggregator:
    """Live aggregate status of the pipeline registered for a hosting configuration."""

    def __init__(self, parameters: ParameterStore, pipelines: IPipelineControl) -> None:
        self._parameters = parameters
        self._pipelines = pipelines

    def get_status(self) -> AggregateStatus:
        """Compute the status fresh from one stage-state snapshot.

        A missing pipeline-name parameter means no pipeline has been deployed
        yet and yields ``Unknown``/``Unknown``. Lookup or query failures raise
        ``PipelineQueryError`` instead.
        """
        try:
            pipeline_name = self._parameters.get(ParameterName.PIPELINE_NAME)
        except ConfigLookupError as exc:
            raise PipelineQueryError(None, str(exc)) from exc

        if not pipeline_name:
            logger.debug("No pipeline registered under %s", self._parameters.namespace)
            return AggregateStatus.unknown()

        status = aggregate_stage_states(self._pipelines.describe_stages(pipeline_name))
        logger.debug("Pipeline %s: %s (%s)", pipeline_name, status.status, status.stage_name)
        return status
