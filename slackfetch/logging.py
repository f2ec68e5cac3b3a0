import logging
import sys

from slackfetch.settings import Settings, settings as default_settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class LogGate(logging.Filter):
    """Let debug-level output and error-level output through independently.

    Records below ERROR pass only when ``debug`` is on, records at ERROR and
    above only when ``error`` is on. With both off nothing is emitted.
    """

    def __init__(self, debug: bool, error: bool) -> None:
        super().__init__()
        self.debug = debug
        self.error = error

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.ERROR:
            return self.error
        return self.debug


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from the debug/error gates.

    Call once per process, before the first invocation.
    """
    settings = settings or default_settings

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(LogGate(debug=settings.debug_logging, error=settings.error_logging))

    if settings.log_json:
        from pythonjsonlogger.json import JsonFormatter

        handler.setFormatter(
            JsonFormatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.debug_logging else logging.ERROR)
    root.handlers.clear()
    root.addHandler(handler)

    # Third-party clients stay at WARNING even in debug mode.
    for name in ("botocore", "boto3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
