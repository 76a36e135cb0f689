from collections.abc import AsyncGenerator
from unittest import mock

from pydantic import HttpUrl

import pytest

from statusify.application.services.session_bridge import SessionBridge
from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.entities.user import UserLink
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.domain.schemas.auth import ChatTokenPayload
from statusify.domain.schemas.auth import OAuthProviderTokenPayload
from statusify.infrastructure.adapters.providers.slack.client import SlackOAuthClientAdapter
from statusify.infrastructure.adapters.providers.spotify.client import SpotifyOAuthClientAdapter
from statusify.infrastructure.adapters.security import JwtCarrierSigner

from tests.unit.factories.entities.auth import ChatIdentityFactory
from tests.unit.factories.entities.user import UserLinkFactory
from tests.unit.factories.schemas.auth import ChatTokenPayloadFactory
from tests.unit.factories.schemas.auth import OAuthProviderTokenPayloadFactory

# --- Security ---


@pytest.fixture
def carrier_signer() -> JwtCarrierSigner:
    return JwtCarrierSigner(secret_key="dummy-unit-secret-key-0123456789abcdef")


@pytest.fixture
def session_bridge(carrier_signer: JwtCarrierSigner) -> SessionBridge:
    return SessionBridge(signer=carrier_signer)


# --- Repository Mocks ---


@pytest.fixture
def mock_user_link_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=UserLinkRepository)


# --- Entity Mocks ---


@pytest.fixture
def identity(request: pytest.FixtureRequest) -> ChatIdentity:
    return ChatIdentityFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def user_link(request: pytest.FixtureRequest) -> UserLink:
    return UserLinkFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def token_payload(request: pytest.FixtureRequest) -> OAuthProviderTokenPayload:
    return OAuthProviderTokenPayloadFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def chat_token(request: pytest.FixtureRequest) -> ChatTokenPayload:
    return ChatTokenPayloadFactory.build(**getattr(request, "param", {}))


# --- Client Mocks ---


@pytest.fixture
def mock_chat_client(chat_token: ChatTokenPayload) -> mock.AsyncMock:
    return mock.AsyncMock(
        spec=ChatOAuthClientPort,
        exchange_code_for_token=mock.AsyncMock(return_value=chat_token),
    )


@pytest.fixture
def mock_provider_client(token_payload: OAuthProviderTokenPayload) -> mock.AsyncMock:
    return mock.AsyncMock(
        spec=ProviderOAuthClientPort,
        exchange_code_for_token=mock.AsyncMock(return_value=token_payload),
        get_authorization_url=mock.Mock(
            return_value=HttpUrl("https://accounts.spotify.com/authorize?state=dummy-state"),
        ),
    )


# --- Adapters ---


@pytest.fixture
async def slack_client(request: pytest.FixtureRequest) -> AsyncGenerator[SlackOAuthClientAdapter]:
    params = getattr(request, "param", {})

    async with SlackOAuthClientAdapter(
        client_id="dummy-client-id",
        client_secret="dummy-client-secret",
        token_endpoint=HttpUrl("https://slack.com/api/oauth.v2.access"),
        redirect_uri=params.get("redirect_uri"),
    ) as client:
        yield client


@pytest.fixture
async def spotify_client() -> AsyncGenerator[SpotifyOAuthClientAdapter]:
    async with SpotifyOAuthClientAdapter(
        client_id="dummy-client-id",
        client_secret="dummy-client-secret",
        redirect_uri=HttpUrl("http://127.0.0.1:8000/spotify/callback"),
    ) as client:
        yield client
