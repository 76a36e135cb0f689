import base64
from typing import Final
from urllib.parse import urlencode

import httpx

from pydantic import HttpUrl

from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.schemas.auth import OAuthProviderTokenPayload
from statusify.infrastructure.adapters.providers.spotify.mappers import to_domain_token_payload
from statusify.infrastructure.adapters.providers.spotify.schemas import SpotifyToken
from statusify.infrastructure.adapters.providers.spotify.types import SpotifyScope


class SpotifyOAuthClientAdapter(ProviderOAuthClientPort):
    """An asynchronous client for the Spotify Accounts service.

    Only the authorization code grant is covered: building the authorization URL
    and exchanging the code it yields. Requests are never retried.
    """

    AUTH_ENDPOINT: Final[HttpUrl] = HttpUrl("https://accounts.spotify.com/authorize")
    TOKEN_ENDPOINT: Final[HttpUrl] = HttpUrl("https://accounts.spotify.com/api/token")

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: HttpUrl,
        timeout: float = 30.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        self._client: httpx.AsyncClient = httpx.AsyncClient(timeout=timeout)

    def _get_basic_auth_header(self) -> str:
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded = base64.b64encode(credentials.encode()).decode()
        return f"Basic {encoded}"

    @property
    def token_endpoint(self) -> HttpUrl:
        return self.TOKEN_ENDPOINT

    def get_authorization_url(self, state: str) -> HttpUrl:
        params = {
            "client_id": self.client_id,
            "response_type": "code",
            "redirect_uri": str(self.redirect_uri),
            "scope": SpotifyScope.required_scopes(),
            "state": state,
        }

        return HttpUrl(f"{self.AUTH_ENDPOINT}?{urlencode(params)}")

    async def exchange_code_for_token(self, code: str) -> OAuthProviderTokenPayload:
        response = await self._client.post(
            str(self.token_endpoint),
            headers={
                "Authorization": self._get_basic_auth_header(),
                "Content-Type": "application/x-www-form-urlencoded",
            },
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": str(self.redirect_uri),
            },
        )
        response.raise_for_status()

        return to_domain_token_payload(SpotifyToken.model_validate_json(response.content))

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SpotifyOAuthClientAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
