from collections.abc import AsyncGenerator
from collections.abc import Iterator
from http.cookies import Morsel
from http.cookies import SimpleCookie
from unittest import mock

from httpx import ASGITransport
from httpx import AsyncClient
from httpx import Response

from pydantic import HttpUrl

from sqlalchemy.ext.asyncio import AsyncSession

import pytest

from statusify.application.services.session_bridge import SessionBridge
from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.infrastructure.entrypoints.api.dependencies import get_carrier_signer
from statusify.infrastructure.entrypoints.api.dependencies import get_db
from statusify.infrastructure.entrypoints.api.dependencies import get_session_bridge
from statusify.infrastructure.entrypoints.api.dependencies import get_slack_client
from statusify.infrastructure.entrypoints.api.dependencies import get_spotify_client
from statusify.infrastructure.entrypoints.api.dependencies import get_user_link_repository
from statusify.infrastructure.entrypoints.api.main import app


@pytest.fixture(name="mock_api_logger")
def block_api_logging_reconfiguration() -> Iterator[mock.Mock]:
    """Prevents FastAPI lifespan from overwriting test logging config."""
    with mock.patch("statusify.infrastructure.entrypoints.api.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def mock_slack_client() -> mock.AsyncMock:
    return mock.AsyncMock(spec=ChatOAuthClientPort)


@pytest.fixture
def mock_spotify_client() -> mock.AsyncMock:
    return mock.AsyncMock(
        spec=ProviderOAuthClientPort,
        get_authorization_url=mock.Mock(
            return_value=HttpUrl("https://accounts.spotify.com/authorize?state=dummy-state"),
        ),
    )


@pytest.fixture
def mock_user_link_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=UserLinkRepository)


@pytest.fixture
def session_bridge() -> SessionBridge:
    # The same carrier issuer as the application, bound to the configured secret key.
    return get_session_bridge(signer=get_carrier_signer())


@pytest.fixture
def identity() -> ChatIdentity:
    return ChatIdentity(chat_user_id="U1", chat_access_token="tok1")


@pytest.fixture
def carrier_cookies(session_bridge: SessionBridge, identity: ChatIdentity) -> dict[str, str]:
    return {carrier.name: carrier.value for carrier in session_bridge.issue(identity)}


@pytest.fixture
async def async_client(
    mock_api_logger: mock.Mock,
    async_session_db: AsyncSession,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[AsyncClient]:
    """
    AsyncClient on the application, with optional mocked ports.

    IMPORTANT: Place fixtures dependencies first:
        async def test_XXX(mock_spotify_client, async_client):
    NOT: async_client BEFORE:
        async def test_XXX(async_client, mock_spotify_client):

    Without mocks, the real Slack and Spotify adapters are used (combine them with
    `httpx_mock`) along with a SQLite session for the user link store.
    """

    async def override_get_db():
        yield async_session_db

    app.dependency_overrides[get_db] = override_get_db

    if "mock_user_link_repository" in request.fixturenames:
        mock_repository = request.getfixturevalue("mock_user_link_repository")
        app.dependency_overrides[get_user_link_repository] = lambda: mock_repository

    if "mock_slack_client" in request.fixturenames:
        mock_chat_client = request.getfixturevalue("mock_slack_client")
        app.dependency_overrides[get_slack_client] = lambda: mock_chat_client

    if "mock_spotify_client" in request.fixturenames:
        mock_provider_client = request.getfixturevalue("mock_spotify_client")
        app.dependency_overrides[get_spotify_client] = lambda: mock_provider_client

    # Carriers are Secure cookies: talk HTTPS so that the client jar keeps them.
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://test",
    ) as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()


def parse_set_cookies(response: Response) -> dict[str, Morsel]:
    """Parses every `Set-Cookie` header of a response, by cookie name."""
    morsels: dict[str, Morsel] = {}

    for header in response.headers.get_list("set-cookie"):
        cookie: SimpleCookie = SimpleCookie()
        cookie.load(header)
        morsels.update(cookie)

    return morsels
