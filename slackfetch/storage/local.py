import logging
from pathlib import Path

from slackfetch.exceptions import StorageError
from slackfetch.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    def __init__(self, base_dir: str = ".") -> None:
        self.base_dir = Path(base_dir)

    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        path = self.base_dir / key
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        resolved = str(path.resolve())
        logger.debug("Saved to: %s (%d bytes)", resolved, len(data))
        return resolved
