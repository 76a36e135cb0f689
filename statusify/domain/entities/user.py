from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class UserLink:
    """A Slack user linked to its Spotify account tokens."""

    chat_user_id: str
    chat_access_token: str

    music_access_token: str
    music_refresh_token: str
    music_token_type: str
    music_expires_at: datetime
