"""Root conftest: isolated settings and in-memory collaborators."""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest

from slackfetch.settings import Settings
from slackfetch.storage.base import StorageBackend


class MemoryStorage(StorageBackend):
    """Keeps writes in a dict and answers with a fixed descriptor. No I/O."""

    def __init__(self, descriptor: str = "test/file") -> None:
        self.descriptor = descriptor
        self.files: dict[str, bytes] = {}

    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        self.files[key] = data
        return self.descriptor


@pytest.fixture(autouse=True)
def _clear_slackfetch_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SLACKFETCH_"):
            monkeypatch.delenv(key, raising=False)


def _make_settings(**overrides) -> Settings:
    defaults = dict(
        mode="production",
        access_token="123",
        storage_bucket="testBucket",
        notification_topic="arn:aws:sns:us-east-1:000000000000:slack-integrator",
    )
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


@pytest.fixture()
def make_settings():
    return _make_settings


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage("test/file")


@pytest.fixture()
def sample_event() -> dict:
    return {"eventId": "testEvent", "channel": "C123", "url": "https://test.com", "msg": "testMsg"}


@pytest.fixture()
def mock_response():
    def _make(status_code: int = 200, content: bytes = b"\xff\xd8\xff\xe0binary", headers: dict | None = None):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.headers = headers if headers is not None else {"Content-Type": "image/jpeg"}
        response.raise_for_status.return_value = None
        return response

    return _make
