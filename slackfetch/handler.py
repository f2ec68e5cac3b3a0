"""Invocation entry point.

``handler(event, context)`` is the function the runtime calls once per
event. Clients and the pipeline are built on first use and reused for every
later invocation in the same process.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from slackfetch.clients import get_s3_client, get_sns_client
from slackfetch.fetcher import FileFetcher
from slackfetch.logging import configure_logging
from slackfetch.services.notification_service import NotificationPublisher
from slackfetch.services.pipeline_service import FetchPipeline
from slackfetch.settings import Mode, Settings, settings as default_settings
from slackfetch.storage.factory import get_storage

logger = logging.getLogger(__name__)


def build_pipeline(settings: Settings) -> FetchPipeline:
    s3_client = None if settings.mode == Mode.DEVELOPMENT else get_s3_client(settings)
    sns_client = get_sns_client(settings) if settings.notification_topic else None
    return FetchPipeline(
        settings=settings,
        fetcher=FileFetcher(timeout=settings.fetch_timeout),
        publisher=NotificationPublisher(sns_client, settings.notification_topic),
        storage_factory=functools.partial(get_storage, s3_client=s3_client),
    )


@functools.cache
def get_pipeline() -> FetchPipeline:
    configure_logging(default_settings)
    logger.debug("Building pipeline for mode=%s", default_settings.mode.value)
    return build_pipeline(default_settings)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    return get_pipeline().run(event)
