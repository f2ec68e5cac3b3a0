class SlackFetchError(Exception):
    """Base class for all slackfetch errors."""


class PipelineError(SlackFetchError):
    """A step failure that aborts the fetch pipeline and is returned to the caller."""


class FetchError(PipelineError):
    pass


class StorageError(PipelineError):
    pass


class NotificationError(SlackFetchError):
    """Publishing a failure notification failed. Never returned to the caller."""
