from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from slackfetch.exceptions import StorageError
from slackfetch.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class S3Storage(StorageBackend):
    def __init__(self, bucket: str, client) -> None:
        self.bucket = bucket
        self.client = client

    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        logger.debug("Saving to: %s/%s", self.bucket, key)
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(str(exc)) from exc
        location = f"{self.bucket}/{key}"
        logger.info("Uploaded %s to s3://%s (%d bytes)", key, location, len(data))
        return location
