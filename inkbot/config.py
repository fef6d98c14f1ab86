"""Settings via pydantic-settings with INKBOT_ env prefix.

DB connection fields and the LINE channel token use validation_alias to read
the same unprefixed env vars the deployment already provides, so a single
.env file drives both the container and the Python app.
"""

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INKBOT_", env_file=".env")

    # LINE Messaging API
    channel_access_token: str = Field("", validation_alias="CHANNEL_ACCESS_TOKEN")
    line_api_base_url: str = "https://api.line.me"

    # Upstream data (splatoon3.ink)
    schedules_url: str = "https://splatoon3.ink/data/schedules.json"
    locale_url: str = "https://splatoon3.ink/data/locale/ja-JP.json"
    festivals_url: str = "https://splatoon3.ink/data/festivals.json"
    coop_url: str = "https://splatoon3.ink/data/coop.json"
    http_timeout_connect: int = 10  # seconds
    http_timeout_read: int = 30  # seconds

    # Schedule lookup
    timezone: str = "Asia/Tokyo"
    max_lookahead: int = 5  # Max "next" cue words honoured per query
    reply_on_unknown: bool = True

    # Cache store
    cache_backend: Literal["memory", "database"] = "database"
    database_url: str = ""  # Overrides the DB_* fields when set
    db_host: str = Field("localhost", validation_alias="DB_HOST")
    db_port: int = Field(5432, validation_alias="DB_PORT")
    db_user: str = Field("inkbot", validation_alias="DB_USER")
    db_password: str = Field("inkbot_dev_password", validation_alias="DB_PASSWORD")
    db_name: str = Field("inkbot", validation_alias="DB_NAME")

    # Runtime
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {value}") from exc
        return value

    @field_validator("max_lookahead")
    @classmethod
    def _validate_lookahead(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_lookahead must be >= 0")
        return value

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def db_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"
