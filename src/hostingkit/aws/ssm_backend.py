"""SSM Parameter Store backend implementing IParameterReader."""

from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from hostingkit.aws._session import make_client
from hostingkit.core.exceptions import ConfigLookupError

logger = logging.getLogger(__name__)


class SSMParameterReader:
    """Production IParameterReader backed by SSM Parameter Store."""

    NOT_FOUND = "ParameterNotFound"

    def __init__(self, region: str | None = None, endpoint_url: str | None = None,
                 profile: str | None = None) -> None:
        self._client = make_client("ssm", region, endpoint_url, profile)

    def get_parameter(self, key: str) -> str | None:
        logger.debug("Reading parameter %s", key)
        try:
            resp = self._client.get_parameter(Name=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == self.NOT_FOUND:
                return None
            logger.error("Error retrieving parameter %s", key)
            raise ConfigLookupError(key, str(exc)) from exc
        except BotoCoreError as exc:
            logger.error("Error retrieving parameter %s", key)
            raise ConfigLookupError(key, str(exc)) from exc
        return resp.get("Parameter", {}).get("Value")
