"""hostingkit exception hierarchy."""

from __future__ import annotations


class HostingKitError(Exception):
    """Base exception for all hostingkit errors."""


class InvalidConfigError(HostingKitError):
    """Required hosting configuration is missing or malformed."""


class ConfigLookupError(HostingKitError):
    """Parameter store lookup failed for a reason other than "not found"."""

    def __init__(self, parameter_key: str, message: str) -> None:
        self.parameter_key = parameter_key
        super().__init__(f"Parameter lookup for {parameter_key!r} failed: {message}")


class PipelineQueryError(HostingKitError):
    """Reading the pipeline stage states failed."""

    def __init__(self, pipeline_name: str | None, message: str) -> None:
        self.pipeline_name = pipeline_name
        super().__init__(f"Pipeline query for {pipeline_name!r} failed: {message}")


class TriggerExecutionError(HostingKitError):
    """Starting a pipeline execution failed."""

    def __init__(self, pipeline_name: str | None, message: str) -> None:
        self.pipeline_name = pipeline_name
        super().__init__(f"Starting pipeline {pipeline_name!r} failed: {message}")


class ConnectivityError(HostingKitError):
    """The caller has no usable AWS identity or session."""


class BucketProbeError(HostingKitError):
    """Bucket existence could not be determined (strict probe only)."""
