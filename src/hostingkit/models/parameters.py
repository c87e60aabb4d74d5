"""Logical names of the values stored per namespace in the parameter store."""

from __future__ import annotations

from enum import StrEnum


class ParameterName(StrEnum):
    PIPELINE_NAME = "pipeline-name"
    CONNECTION_ARN = "connection-arn"
    CONNECTION_NAME = "connection-name"
    CONNECTION_REGION = "connection-region"
