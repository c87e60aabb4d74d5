"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class AwsConfig(BaseSettings):
    """AWS client configuration shared by every backend."""

    model_config = {"env_prefix": "HOSTINGKIT_AWS_"}

    region: str | None = None  # falls back to the profile / AWS_DEFAULT_REGION
    endpoint_url: str | None = None  # LocalStack override
    profile: str | None = None


class HostingSettings(BaseSettings):
    """Hosting configuration values read from the environment."""

    model_config = {"env_prefix": "HOSTINGKIT_HOSTING_"}

    repo_url: str = ""
    branch_name: str = ""
    framework: str = ""
    domain_name: str = ""


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "HOSTINGKIT_"}

    log_level: str = "INFO"

    aws: AwsConfig = Field(default_factory=AwsConfig)
    hosting: HostingSettings = Field(default_factory=HostingSettings)
