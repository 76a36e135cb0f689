from pydantic import AwareDatetime

from statusify.domain.schemas.base import BaseEntity


class OAuthProviderTokenPayload(BaseEntity):
    """Represents the raw, transient OAuth2 token data from a music provider.

    This schema is a Value Object used by provider clients to structure authentication
    credentials. Its fields are handed over to the user link as they were received.
    """

    token_type: str
    access_token: str
    refresh_token: str
    expires_at: AwareDatetime


class ChatTokenPayload(BaseEntity):
    """The user part of a chat platform token exchange.

    Only the identity of the authorizing user and its access token are needed to
    continue the flow; the remaining fields are kept for logging purpose.
    """

    user_id: str
    access_token: str
    token_type: str | None = None
    scope: str | None = None
    team_id: str | None = None
