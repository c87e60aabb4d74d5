"""STS backend implementing IIdentityService."""

from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from hostingkit.aws._session import make_client
from hostingkit.core.exceptions import ConnectivityError
from hostingkit.models.identity import CallerIdentity

logger = logging.getLogger(__name__)


class STSIdentityService:
    """Production IIdentityService backed by STS GetCallerIdentity."""

    def __init__(self, region: str | None = None, endpoint_url: str | None = None,
                 profile: str | None = None) -> None:
        self._client = make_client("sts", region, endpoint_url, profile)

    def who_am_i(self) -> CallerIdentity:
        try:
            resp = self._client.get_caller_identity()
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error checking caller identity")
            raise ConnectivityError(f"identity check failed: {exc}") from exc
        return CallerIdentity(
            account=resp["Account"], arn=resp["Arn"], user_id=resp.get("UserId", ""),
        )

    def current_region(self) -> str | None:
        """Region the client resolved from settings, profile or environment."""
        return self._client.meta.region_name
