"""Start a pipeline execution unless one is already running."""

from __future__ import annotations

import logging

from hostingkit.core.exceptions import ConfigLookupError, TriggerExecutionError
from hostingkit.core.protocols import IPipelineControl
from hostingkit.models.parameters import ParameterName
from hostingkit.models.pipeline import TriggerResult
from hostingkit.services.parameter_store import ParameterStore
from hostingkit.services.pipeline_status import PipelineStatusAggregator

logger = logging.getLogger(__name__)


class ExecutionTrigger:
    """Read-then-act guard around StartPipelineExecution.

    Two concurrent ``start()`` calls can both observe a non-running pipeline
    and both start it. Pass ``client_request_token`` to let CodePipeline
    deduplicate retries of the same request; nothing here retries on its own.
    """

    def __init__(self, parameters: ParameterStore, pipelines: IPipelineControl,
                 aggregator: PipelineStatusAggregator | None = None) -> None:
        self._parameters = parameters
        self._pipelines = pipelines
        self._aggregator = aggregator or PipelineStatusAggregator(parameters, pipelines)

    def start(self, client_request_token: str | None = None) -> TriggerResult:
        observed = self._aggregator.get_status()
        if observed.is_in_progress:
            logger.info("Pipeline is already in progress (stage %s).", observed.stage_name)
            return TriggerResult(started=False, observed=observed)

        try:
            pipeline_name = self._parameters.get(ParameterName.PIPELINE_NAME)
        except ConfigLookupError as exc:
            raise TriggerExecutionError(None, str(exc)) from exc
        if not pipeline_name:
            raise TriggerExecutionError(
                None, f"no pipeline registered at {self._parameters.key_for(ParameterName.PIPELINE_NAME)}"
            )

        execution_id = self._pipelines.start_execution(pipeline_name, client_request_token)
        logger.info("Started pipeline %s (execution %s).", pipeline_name, execution_id)
        return TriggerResult(
            pipeline_name=pipeline_name, started=True, execution_id=execution_id, observed=observed,
        )
