from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from statusify import BASE_DIR


class SlackSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SLACK_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    CLIENT_ID: str
    CLIENT_SECRET: str

    TOKEN_ENDPOINT: HttpUrl = Field(default=HttpUrl("https://slack.com/api/oauth.v2.access"))
    # Must match the one of the authorize request, if it was given.
    REDIRECT_URI: HttpUrl | None = None

    HTTP_TIMEOUT: float = 30.0


slack_settings = SlackSettings()
