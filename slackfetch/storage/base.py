from __future__ import annotations

import time
from abc import ABC, abstractmethod

FILE_EXTENSION = ".jpg"


def generate_key() -> str:
    """Timestamp-based file name. Two writes in the same millisecond collide."""
    return f"{time.time_ns() // 1_000_000}{FILE_EXTENSION}"


class StorageBackend(ABC):
    @abstractmethod
    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        """Save data under key and return the location descriptor."""
        ...

    def put(self, data: bytes) -> str:
        """Save data under a freshly generated key."""
        return self.save(generate_key(), data)
