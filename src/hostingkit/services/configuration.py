"""Build the immutable HostingConfiguration for one CLI invocation."""

from __future__ import annotations

from pydantic import ValidationError

from hostingkit.core.config import HostingSettings
from hostingkit.core.exceptions import InvalidConfigError
from hostingkit.models.hosting import HostingConfiguration


def build_hosting_configuration(settings: HostingSettings | None = None,
                                **overrides: str | None) -> HostingConfiguration:
    """Merge non-empty overrides (CLI flags) over environment settings."""
    if settings is None:
        settings = HostingSettings()
    values = settings.model_dump()
    unknown = set(overrides) - set(values)
    if unknown:
        raise InvalidConfigError(f"unknown hosting configuration fields: {sorted(unknown)}")
    values.update({k: v for k, v in overrides.items() if v})
    try:
        return HostingConfiguration.model_validate(values)
    except ValidationError as exc:
        raise InvalidConfigError(f"invalid hosting configuration: {exc}") from exc
