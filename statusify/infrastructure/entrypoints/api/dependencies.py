from collections.abc import AsyncGenerator
from datetime import timedelta

from fastapi import Depends

from sqlalchemy.ext.asyncio import AsyncSession

from statusify.application.services.session_bridge import SessionBridge
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.domain.ports.security import CarrierSignerPort
from statusify.infrastructure.adapters.database.repositories.users import UserLinkSQLRepository
from statusify.infrastructure.adapters.database.session import session_scope
from statusify.infrastructure.adapters.providers.slack.client import SlackOAuthClientAdapter
from statusify.infrastructure.adapters.providers.spotify.client import SpotifyOAuthClientAdapter
from statusify.infrastructure.adapters.security import JwtCarrierSigner
from statusify.infrastructure.config.settings.app import app_settings
from statusify.infrastructure.config.settings.slack import slack_settings
from statusify.infrastructure.config.settings.spotify import spotify_settings


def get_carrier_signer() -> CarrierSignerPort:
    return JwtCarrierSigner(secret_key=app_settings.SECRET_KEY, algorithm=app_settings.CARRIER_ALGORITHM)


def get_session_bridge(signer: CarrierSignerPort = Depends(get_carrier_signer)) -> SessionBridge:
    return SessionBridge(signer=signer, ttl=timedelta(seconds=app_settings.CARRIER_TTL_SECONDS))


def get_authorization_state() -> str:
    return spotify_settings.STATE


async def get_db() -> AsyncGenerator[AsyncSession]:  # pragma: no cover
    async with session_scope() as session:
        yield session


def get_user_link_repository(session: AsyncSession = Depends(get_db)) -> UserLinkRepository:
    return UserLinkSQLRepository(session)


async def get_slack_client() -> AsyncGenerator[ChatOAuthClientPort]:
    async with SlackOAuthClientAdapter(
        client_id=slack_settings.CLIENT_ID,
        client_secret=slack_settings.CLIENT_SECRET,
        token_endpoint=slack_settings.TOKEN_ENDPOINT,
        redirect_uri=slack_settings.REDIRECT_URI,
        timeout=slack_settings.HTTP_TIMEOUT,
    ) as slack_client:
        yield slack_client


async def get_spotify_client() -> AsyncGenerator[ProviderOAuthClientPort]:
    async with SpotifyOAuthClientAdapter(
        client_id=spotify_settings.CLIENT_ID,
        client_secret=spotify_settings.CLIENT_SECRET,
        redirect_uri=spotify_settings.REDIRECT_URI,
        timeout=spotify_settings.HTTP_TIMEOUT,
    ) as spotify_client:
        yield spotify_client
