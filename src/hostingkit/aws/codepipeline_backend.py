"""CodePipeline backend implementing IPipelineControl."""

from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from hostingkit.aws._session import make_client
from hostingkit.core.exceptions import PipelineQueryError, TriggerExecutionError
from hostingkit.models.pipeline import StageState

logger = logging.getLogger(__name__)


class CodePipelineControl:
    """Production IPipelineControl backed by AWS CodePipeline."""

    def __init__(self, region: str | None = None, endpoint_url: str | None = None,
                 profile: str | None = None) -> None:
        self._client = make_client("codepipeline", region, endpoint_url, profile)

    def describe_stages(self, pipeline_name: str) -> list[StageState]:
        """Stage states in pipeline order, from a single GetPipelineState response."""
        try:
            resp = self._client.get_pipeline_state(name=pipeline_name)
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error getting pipeline state for %s", pipeline_name)
            raise PipelineQueryError(pipeline_name, str(exc)) from exc

        stages: list[StageState] = []
        for raw in resp.get("stageStates") or []:
            latest = raw.get("latestExecution") or {}
            stages.append(StageState(
                stage_name=raw.get("stageName"),
                latest_execution_status=latest.get("status"),
            ))
        return stages

    def start_execution(self, pipeline_name: str, client_request_token: str | None = None) -> str:
        kwargs: dict = {"name": pipeline_name}
        if client_request_token:
            kwargs["clientRequestToken"] = client_request_token
        try:
            resp = self._client.start_pipeline_execution(**kwargs)
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error starting pipeline execution for %s", pipeline_name)
            raise TriggerExecutionError(pipeline_name, str(exc)) from exc
        return resp["pipelineExecutionId"]
