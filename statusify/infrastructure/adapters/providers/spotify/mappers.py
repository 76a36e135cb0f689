from statusify.domain.schemas.auth import OAuthProviderTokenPayload
from statusify.infrastructure.adapters.providers.spotify.schemas import SpotifyToken


def to_domain_token_payload(spotify_token: SpotifyToken) -> OAuthProviderTokenPayload:
    """Converts a SpotifyToken schema object to a domain OAuthProviderTokenPayload.

    A code exchange must always grant a refresh token, otherwise the link would be
    useless once the access token expires.
    """
    if not spotify_token.refresh_token:
        raise ValueError("Refresh token is missing from the code exchange response.")

    return OAuthProviderTokenPayload(
        token_type=spotify_token.token_type,
        access_token=spotify_token.access_token,
        refresh_token=spotify_token.refresh_token,
        expires_at=spotify_token.expires_at,
    )
