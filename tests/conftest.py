"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from hostingkit.models.hosting import HostingConfiguration
from hostingkit.models.parameters import ParameterName
from hostingkit.services.namespace import parameter_key, resolve_namespace
from hostingkit.services.parameter_store import ParameterStore
from tests.fakes import MemoryParameterReader, MemoryPipelineControl

REPO_URL = "https://github.com/acme/site.git"
BRANCH = "main"
PIPELINE = "acme-site-main"


@pytest.fixture
def hosting_config() -> HostingConfiguration:
    return HostingConfiguration(
        repo_url=REPO_URL, branch_name=BRANCH, framework="reactjs", domain_name="www.acme.test",
    )


@pytest.fixture
def pipeline_key() -> str:
    return parameter_key(resolve_namespace(REPO_URL, BRANCH), ParameterName.PIPELINE_NAME.value)


@pytest.fixture
def reader(pipeline_key) -> MemoryParameterReader:
    return MemoryParameterReader({pipeline_key: PIPELINE})


@pytest.fixture
def empty_reader() -> MemoryParameterReader:
    return MemoryParameterReader()


@pytest.fixture
def pipelines() -> MemoryPipelineControl:
    return MemoryPipelineControl()


@pytest.fixture
def params(reader, hosting_config) -> ParameterStore:
    return ParameterStore(reader, hosting_config)
