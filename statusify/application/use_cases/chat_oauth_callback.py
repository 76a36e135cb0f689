import logging

from statusify.application.services.session_bridge import SessionBridge
from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.entities.auth import OAuthHandoff
from statusify.domain.exceptions import ChatAuthRequestError
from statusify.domain.exceptions import ChatExchangeCodeError
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.ports.providers.client import ProviderOAuthClientPort

logger = logging.getLogger(__name__)


async def chat_oauth_callback(
    code: str,
    state: str,
    chat_client: ChatOAuthClientPort,
    provider_client: ProviderOAuthClientPort,
    session_bridge: SessionBridge,
) -> OAuthHandoff:
    """Handles the OAuth callback from the chat platform (first hop).

    This function exchanges the authorization code for the user's identity and
    access token, hands them to the client through the session bridge, then
    builds the music provider authorization URL to continue with. Nothing is
    persisted at this stage.

    Args:
        code: The authorization code received from the chat platform.
        state: The anti-forgery state to send to the music provider.
        chat_client: The client for the chat platform OAuth endpoints.
        provider_client: The client for the music provider OAuth endpoints.
        session_bridge: The carrier issuer for the identity.

    Returns:
        The carriers to set on the client and the URL to redirect it to.

    Raises:
        ChatExchangeCodeError: If the chat platform refused the code.
        ChatAuthRequestError: If the exchange failed for any other reason.
    """
    try:
        chat_token = await chat_client.exchange_code_for_token(code)
    except ChatExchangeCodeError:
        raise
    except Exception as e:
        raise ChatAuthRequestError() from e

    logger.info("Slack user '%s' authorized (team '%s')", chat_token.user_id, chat_token.team_id)

    carriers = session_bridge.issue(
        ChatIdentity(chat_user_id=chat_token.user_id, chat_access_token=chat_token.access_token),
    )

    return OAuthHandoff(
        carriers=carriers,
        authorization_url=provider_client.get_authorization_url(state=state),
    )
