"""Namespace and stack-name derivation from a (repository, branch) pair.

Every value hostingkit stores in the parameter store lives under
``/<namespace>/<logical-name>``. The namespace is recomputed on demand from
the hosting configuration and never stored on its own, so it must be
deterministic across processes: no randomness, no timestamps.

The readable part (owner, repository, branch) is sanitized down to
``[A-Za-z0-9-]``, which can map distinct inputs to the same text
(``feature/x`` and ``feature-x``). A short SHA-256 digest of the canonical
identity is appended to keep those apart.
"""

from __future__ import annotations

import hashlib
import re
from typing import NamedTuple
from urllib.parse import urlparse

from hostingkit.core.exceptions import InvalidConfigError
from hostingkit.core.types import Namespace, ParameterKey
from hostingkit.models.hosting import HostingConfiguration

CONNECTION_PREFIX = "hosting-connection"
MAIN_STACK_PREFIX = "hosting-main"

DIGEST_LENGTH = 8
MAX_NAME_LENGTH = 128  # CloudFormation stack name limit

_SCP_LIKE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>[^/].*)$")
_CODECOMMIT_GRC = re.compile(r"^codecommit::(?P<region>[\w-]+)://(?:[\w-]+@)?(?P<repo>[\w.-]+)$")
_UNSAFE = re.compile(r"[^A-Za-z0-9-]+")
_DEFAULT_PORTS = {"https": 443, "http": 80, "ssh": 22, "git": 9418}


class RepositoryRef(NamedTuple):
    """Parsed, normalized repository location."""

    host: str
    owner: str
    name: str

    @property
    def canonical(self) -> str:
        return f"{self.host}/{self.owner}/{self.name}"


def parse_repository_url(repo_url: str) -> RepositoryRef:
    """Parse https, ssh, scp-style and CodeCommit repository URLs.

    Raises:
        InvalidConfigError: if the URL is empty or has no owner/name path.
    """
    url = (repo_url or "").strip()
    if not url:
        raise InvalidConfigError("repository URL is empty")

    grc = _CODECOMMIT_GRC.match(url)
    if grc:
        host = f"git-codecommit.{grc.group('region')}.amazonaws.com"
        return RepositoryRef(host, "codecommit", _strip_git(grc.group("repo")))

    if "://" in url:
        parsed = urlparse(url)
        host, path = (parsed.hostname or ""), parsed.path
        try:
            port = parsed.port
        except ValueError as exc:
            raise InvalidConfigError(f"invalid port in repository URL: {repo_url!r}") from exc
        if host and port and port != _DEFAULT_PORTS.get(parsed.scheme.lower()):
            host = f"{host}:{port}"
    else:
        scp = _SCP_LIKE.match(url)
        if not scp:
            raise InvalidConfigError(f"not a repository URL: {repo_url!r}")
        host, path = scp.group("host"), scp.group("path")

    segments = [s for s in path.split("/") if s]
    if not host or len(segments) < 2:
        raise InvalidConfigError(f"not a repository URL: {repo_url!r}")

    # https://git-codecommit.<region>.amazonaws.com/v1/repos/<name>
    if segments[:2] == ["v1", "repos"]:
        if len(segments) != 3:
            raise InvalidConfigError(f"not a repository URL: {repo_url!r}")
        return RepositoryRef(host.lower(), "codecommit", _strip_git(segments[2]))

    name = _strip_git(segments[-1])
    if not name:
        raise InvalidConfigError(f"not a repository URL: {repo_url!r}")
    return RepositoryRef(host.lower(), "/".join(segments[:-1]), name)


def _strip_git(name: str) -> str:
    return name[:-4] if name.endswith(".git") else name


def _sanitize(text: str) -> str:
    return _UNSAFE.sub("-", text).strip("-")


def _derive(prefix: str, repo_url: str, branch_name: str) -> str:
    branch = (branch_name or "").strip()
    if not branch:
        raise InvalidConfigError("branch name is empty")
    repo = parse_repository_url(repo_url)

    digest = hashlib.sha256(f"{repo.canonical}#{branch}".encode()).hexdigest()[:DIGEST_LENGTH]
    readable = "-".join(p for p in (prefix, _sanitize(repo.owner), _sanitize(repo.name), _sanitize(branch)) if p)
    readable = readable[: MAX_NAME_LENGTH - DIGEST_LENGTH - 1].rstrip("-")
    return f"{readable}-{digest}"


def resolve_namespace(repo_url: str, branch_name: str) -> Namespace:
    """Namespace scoping all stored configuration for one repository branch."""
    return _derive(CONNECTION_PREFIX, repo_url, branch_name)


def main_stack_name(config: HostingConfiguration) -> str:
    """Name of the hosting stack deployed for this configuration."""
    return _derive(MAIN_STACK_PREFIX, config.repo_url, config.branch_name)


def parameter_key(namespace: Namespace, logical_name: str) -> ParameterKey:
    """Build ``/<namespace>/<logical_name>`` with no doubled or trailing slash."""
    ns = namespace.strip("/")
    name = str(logical_name).strip("/")
    if not ns or not name:
        raise InvalidConfigError(
            f"cannot build parameter key from namespace={namespace!r}, name={logical_name!r}"
        )
    return f"/{ns}/{name}"
