"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from hostingkit.aws.memory_backend import (
    MemoryBucketProbe,
    MemoryIdentityService,
    MemoryParameterReader,
    MemoryPipelineControl,
)

__all__ = ["MemoryBucketProbe", "MemoryIdentityService", "MemoryParameterReader", "MemoryPipelineControl"]
