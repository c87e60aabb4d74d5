"""Hosting configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HostingConfiguration(BaseModel):
    """What to host and where it comes from.

    Immutable once loaded; constructed once per CLI invocation. Emptiness of
    ``repo_url``/``branch_name`` is checked when a namespace is derived, not
    here, so a partially filled configuration can still be displayed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repo_url: str = Field(default="", alias="repoUrl")
    branch_name: str = Field(default="", alias="branchName")
    framework: str = ""
    domain_name: str = Field(default="", alias="domainName")
