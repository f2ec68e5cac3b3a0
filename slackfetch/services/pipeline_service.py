from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from slackfetch.auth import build_fetch_options, resolve_access_token
from slackfetch.exceptions import FetchError, PipelineError
from slackfetch.fetcher import FileFetcher
from slackfetch.models.event import Event
from slackfetch.models.notification import Notification
from slackfetch.services.notification_service import NotificationPublisher
from slackfetch.settings import Settings
from slackfetch.storage.base import StorageBackend
from slackfetch.storage.factory import get_storage

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    STORING = "storing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class PipelineRun:
    """State of a single invocation. Created fresh by every ``execute`` call."""

    state: PipelineState = PipelineState.IDLE
    result: dict[str, Any] | None = None
    error: PipelineError | None = None

    def transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline state: %s -> %s", self.state.value, state.value)
        self.state = state


class FetchPipeline:
    """Fetch the file an event points at, store it, and report failures.

    One ``run`` call is one invocation: fetch, then store, strictly in that
    order. The first failing step ends the run; a single notification is
    attempted and the step's own error is raised to the caller. The pipeline
    holds only its collaborators, so one instance can serve every invocation.
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: FileFetcher,
        publisher: NotificationPublisher,
        storage_factory: Callable[[Settings], StorageBackend] = get_storage,
    ) -> None:
        self.settings = settings
        self.fetcher = fetcher
        self.publisher = publisher
        self.storage_factory = storage_factory

    def run(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Process one event payload and return it extended with ``file``."""
        pipeline_run = self.execute(payload)
        if pipeline_run.error is not None:
            raise pipeline_run.error
        return pipeline_run.result

    def execute(self, payload: dict[str, Any]) -> PipelineRun:
        """Process one event payload without raising pipeline errors."""
        pipeline_run = PipelineRun()
        logger.debug("Event data: %s", payload)

        event = None
        try:
            pipeline_run.transition(PipelineState.FETCHING)
            try:
                event = Event.model_validate(payload)
            except ValidationError as exc:
                raise FetchError(f"Invalid event payload: {exc}") from exc
            if event.file_url is None:
                raise FetchError("Event has no file url")

            storage = self.storage_factory(self.settings)
            token = resolve_access_token(self.settings.mode, self.settings.access_token)
            outcome = self.fetcher.fetch(build_fetch_options(event.file_url, token))

            pipeline_run.transition(PipelineState.STORING)
            location = storage.put(outcome.body)
        except PipelineError as exc:
            pipeline_run.transition(PipelineState.FAILED)
            logger.error("Fetching %s failed: %s", event.url if event else None, exc)
            self._notify(event, exc)
            pipeline_run.error = exc
            return pipeline_run

        pipeline_run.transition(PipelineState.SUCCEEDED)
        pipeline_run.result = {**payload, "file": location}
        return pipeline_run

    def _notify(self, event: Event | None, exc: PipelineError) -> None:
        notification = Notification(
            event_id=event.event_id if event else None,
            channel=event.channel if event else None,
            error_message=str(exc),
        )
        self.publisher.safe_publish(notification)
