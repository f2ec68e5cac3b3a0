import logging

from slackfetch.exceptions import StorageError
from slackfetch.settings import Mode, Settings
from slackfetch.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def get_storage(settings: Settings, s3_client=None) -> StorageBackend:
    """Pick the backend for one invocation: filesystem in development, S3 otherwise."""
    if settings.mode == Mode.DEVELOPMENT:
        from slackfetch.storage.local import LocalStorage

        logger.debug("Using storage backend: local path=%s", settings.storage_local_path)
        return LocalStorage(settings.storage_local_path)

    from botocore.exceptions import BotoCoreError

    from slackfetch.storage.s3 import S3Storage

    if s3_client is None:
        from slackfetch.clients import get_s3_client

        try:
            s3_client = get_s3_client(settings)
        except BotoCoreError as exc:
            raise StorageError(str(exc)) from exc

    logger.debug("Using storage backend: s3 bucket=%s", settings.storage_bucket)
    return S3Storage(bucket=settings.storage_bucket, client=s3_client)
