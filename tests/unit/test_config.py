"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import pytest

from hostingkit.core.config import AppSettings, AwsConfig, HostingSettings
from hostingkit.core.exceptions import InvalidConfigError
from hostingkit.services.configuration import build_hosting_configuration


def test_default_settings():
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.aws.endpoint_url is None


def test_aws_config_env_override(monkeypatch):
    monkeypatch.setenv("HOSTINGKIT_AWS_REGION", "eu-west-1")
    monkeypatch.setenv("HOSTINGKIT_AWS_ENDPOINT_URL", "http://localhost:4566")
    config = AwsConfig()
    assert config.region == "eu-west-1"
    assert config.endpoint_url == "http://localhost:4566"


def test_nested_settings_read_env_at_construction(monkeypatch):
    monkeypatch.setenv("HOSTINGKIT_HOSTING_BRANCH_NAME", "develop")
    assert AppSettings().hosting.branch_name == "develop"


class TestBuildHostingConfiguration:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HOSTINGKIT_HOSTING_REPO_URL", "https://github.com/acme/site")
        monkeypatch.setenv("HOSTINGKIT_HOSTING_BRANCH_NAME", "main")
        config = build_hosting_configuration(HostingSettings())
        assert config.repo_url == "https://github.com/acme/site"
        assert config.branch_name == "main"

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("HOSTINGKIT_HOSTING_BRANCH_NAME", "main")
        config = build_hosting_configuration(HostingSettings(), branch_name="release")
        assert config.branch_name == "release"

    def test_empty_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("HOSTINGKIT_HOSTING_FRAMEWORK", "vuejs")
        config = build_hosting_configuration(HostingSettings(), framework=None, domain_name="")
        assert config.framework == "vuejs"

    def test_unknown_override_raises(self):
        with pytest.raises(InvalidConfigError):
            build_hosting_configuration(HostingSettings(), bucket="nope")

    def test_result_is_immutable(self):
        config = build_hosting_configuration(HostingSettings(), repo_url="https://github.com/a/b")
        with pytest.raises(Exception):
            config.repo_url = "https://github.com/c/d"
