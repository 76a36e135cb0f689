from dataclasses import dataclass
from datetime import datetime

from pydantic import HttpUrl


@dataclass(frozen=True, kw_only=True)
class ChatIdentity:
    """Slack identity carried by the client between the two OAuth hops."""

    chat_user_id: str
    chat_access_token: str


@dataclass(frozen=True, kw_only=True)
class Carrier:
    """A single piece of client-held state (a cookie) to set on the response."""

    name: str
    value: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class OAuthHandoff:
    """Outcome of the first hop: carriers to set and where to send the user next."""

    carriers: list[Carrier]
    authorization_url: HttpUrl
