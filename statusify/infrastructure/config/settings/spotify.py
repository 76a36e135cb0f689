from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from statusify import BASE_DIR


class SpotifySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPOTIFY_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    CLIENT_ID: str
    CLIENT_SECRET: str

    REDIRECT_URI: HttpUrl = Field(default=HttpUrl("http://127.0.0.1:8000/spotify/callback"))

    # Shared by every authorization request of this instance.
    STATE: str = Field(..., min_length=1)

    HTTP_TIMEOUT: float = 30.0


spotify_settings = SpotifySettings()
