"""S3 bucket existence probes implementing IBucketProbe."""

from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from hostingkit.aws._session import make_client
from hostingkit.core.exceptions import BucketProbeError

logger = logging.getLogger(__name__)


class S3BucketProbe:
    """Lenient probe: any error, throttling included, reads as "does not exist"."""

    def __init__(self, region: str | None = None, endpoint_url: str | None = None,
                 profile: str | None = None) -> None:
        self._client = make_client("s3", region, endpoint_url, profile)

    def _probe(self, bucket_name: str) -> None:
        self._client.head_bucket(Bucket=bucket_name)
        self._client.get_bucket_location(Bucket=bucket_name)

    def exists(self, bucket_name: str) -> bool:
        try:
            self._probe(bucket_name)
        except (ClientError, BotoCoreError) as exc:
            logger.debug("Bucket %s treated as absent: %s", bucket_name, exc)
            return False
        return True


class StrictS3BucketProbe(S3BucketProbe):
    """Probe that only reports "absent" for a genuine not-found response."""

    NOT_FOUND_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})

    def exists(self, bucket_name: str) -> bool:
        try:
            self._probe(bucket_name)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in self.NOT_FOUND_CODES:
                return False
            raise BucketProbeError(f"S3 probe failed for bucket {bucket_name!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise BucketProbeError(f"S3 probe failed for bucket {bucket_name!r}: {exc}") from exc
        return True
