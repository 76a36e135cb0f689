from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from statusify import BASE_DIR
from statusify.infrastructure.types import LogHandler
from statusify.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STATUSIFY_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    SECRET_KEY: str = Field(..., min_length=32)

    CARRIER_ALGORITHM: str = "HS256"
    CARRIER_TTL_SECONDS: int = Field(default=60 * 60, gt=0)

    COOKIE_SECURE: bool = True

    LOG_LEVEL_API: LogLevel = "INFO"
    LOG_HANDLERS_API: list[LogHandler] = ["console"]


app_settings = AppSettings()
