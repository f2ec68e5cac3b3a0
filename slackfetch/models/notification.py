from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    event_id: Any = Field(default=None, alias="eventId")
    channel: Any = None
    error_message: str = Field(alias="errorMessage")

    def to_message(self) -> str:
        """Serialize as the pub/sub message body, using the wire field names."""
        return self.model_dump_json(by_alias=True)
