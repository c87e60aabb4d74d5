"""Fail-fast AWS session check run once before any CLI command."""

from __future__ import annotations

import logging
import sys

from hostingkit.core.exceptions import ConnectivityError
from hostingkit.core.protocols import IIdentityService

logger = logging.getLogger(__name__)

ERROR_PREFIX = "ERROR:"
CONNECTIVITY_MESSAGE = (
    f"{ERROR_PREFIX} Impossible to connect to your AWS account. Try to authenticate and try again."
)


class ConnectivityProber:
    def __init__(self, identity: IIdentityService) -> None:
        self._identity = identity
        self.region: str | None = None

    def check(self) -> bool:
        """Return True when the session works; otherwise print one line and exit(1)."""
        try:
            identity = self._identity.who_am_i()
        except ConnectivityError as exc:
            logger.debug("Connectivity check failed: %s", exc)
            print(CONNECTIVITY_MESSAGE, file=sys.stderr)
            sys.exit(1)

        self.region = self._identity.current_region()
        logger.debug("Connected as %s (account %s, region %s)", identity.arn, identity.account, self.region)
        return True
