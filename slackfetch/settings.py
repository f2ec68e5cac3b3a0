from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Mode(str, Enum):
    TEST = "test"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


_MODE_ALIASES = {"dev": Mode.DEVELOPMENT, "prod": Mode.PRODUCTION}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SLACKFETCH_", extra="ignore")

    mode: Mode = Mode.PRODUCTION

    access_token: str = ""

    storage_bucket: str = ""
    storage_local_path: str = "."

    notification_topic: str = ""

    aws_region: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_endpoint_url: str = ""

    fetch_timeout: float | None = None

    debug_logging: bool = False
    error_logging: bool = False
    log_json: bool = False

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            return _MODE_ALIASES.get(value, value)
        return value


settings = Settings()
