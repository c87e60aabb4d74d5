"""Type aliases used across hostingkit."""

from __future__ import annotations

Namespace = str
ParameterKey = str
PipelineName = str
ExecutionId = str
BucketName = str
