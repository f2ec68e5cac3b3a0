from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TransferMode(str, Enum):
    BINARY = "binary"
    TEXT = "text"


class FetchOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    transfer_mode: TransferMode = TransferMode.BINARY
    authorization_header: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": self.authorization_header}


class FetchOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = {}
    body: bytes = b""

    @property
    def content_type(self) -> str | None:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None

    @property
    def content_length(self) -> int:
        return len(self.body)
