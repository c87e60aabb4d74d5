"""Namespace-scoped reads from the parameter store."""

from __future__ import annotations

from hostingkit.core.exceptions import InvalidConfigError
from hostingkit.core.protocols import IParameterReader
from hostingkit.core.types import Namespace, ParameterKey
from hostingkit.models.hosting import HostingConfiguration
from hostingkit.models.parameters import ParameterName
from hostingkit.services.namespace import parameter_key, resolve_namespace


class ParameterStore:
    """Reads the values stored under the namespace of one hosting configuration.

    The namespace is derived on every call rather than cached; it is cheap and
    keeps the (repository, branch) pair the only source of truth.
    """

    def __init__(self, reader: IParameterReader, config: HostingConfiguration) -> None:
        self._reader = reader
        self._config = config

    @property
    def namespace(self) -> Namespace:
        return resolve_namespace(self._config.repo_url, self._config.branch_name)

    def key_for(self, name: ParameterName) -> ParameterKey:
        try:
            logical = ParameterName(name)
        except ValueError as exc:
            raise InvalidConfigError(f"unknown parameter name: {name!r}") from exc
        return parameter_key(self.namespace, logical.value)

    def get(self, name: ParameterName) -> str | None:
        """Raw stored value, or None when the parameter does not exist.

        Raises:
            InvalidConfigError: the hosting configuration has no usable repo/branch.
            ConfigLookupError: the parameter store could not be read.
        """
        return self._reader.get_parameter(self.key_for(name))
