from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """Inbound trigger payload: ``{eventId, channel, url, msg}``.

    Only ``url`` drives the pipeline and it is checked there, not here.
    Every field is left untyped so any payload validates and is carried
    through unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    url: Any = None
    event_id: Any = Field(default=None, alias="eventId")
    channel: Any = None
    msg: Any = None

    @property
    def file_url(self) -> str | None:
        if isinstance(self.url, str) and self.url.strip():
            return self.url
        return None
