from __future__ import annotations

import logging

import requests

from slackfetch.exceptions import FetchError
from slackfetch.models.fetch import FetchOptions, FetchOutcome, TransferMode

logger = logging.getLogger(__name__)


class FileFetcher:
    """Single-attempt authenticated GET of a remote file."""

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, options: FetchOptions) -> FetchOutcome:
        logger.debug("Fetching file from %s (transfer_mode=%s)", options.url, options.transfer_mode.value)

        try:
            response = self.session.get(options.url, headers=options.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(str(exc)) from exc

        # TEXT mirrors the options model; build_fetch_options always asks for BINARY.
        if options.transfer_mode == TransferMode.BINARY:
            body = response.content
        else:
            body = response.text.encode(response.encoding or "utf-8")

        outcome = FetchOutcome(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=body,
        )
        logger.debug(
            "Fetched %s: status=%d content_type=%s (%d bytes)",
            options.url,
            outcome.status_code,
            outcome.content_type,
            outcome.content_length,
        )
        return outcome
