import logging
import secrets

from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.entities.user import UserLink
from statusify.domain.exceptions import ProviderExchangeCodeError
from statusify.domain.exceptions import ProviderStateMismatchError
from statusify.domain.exceptions import UserLinkStoreError
from statusify.domain.mappers.user import user_link_from_tokens
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.ports.repositories.users import UserLinkRepository

logger = logging.getLogger(__name__)


async def oauth_callback(
    code: str,
    state: str,
    expected_state: str,
    identity: ChatIdentity,
    provider_client: ProviderOAuthClientPort,
    user_link_repository: UserLinkRepository,
) -> UserLink:
    """Handles the OAuth callback from the music provider (second hop).

    This function checks the anti-forgery state, exchanges the authorization code
    for the provider tokens, then links them to the chat identity carried over
    from the first hop.

    Args:
        code: The authorization code received from the music provider.
        state: The state echoed back by the music provider.
        expected_state: The state sent along the authorization URL.
        identity: The chat identity read back from the session carriers.
        provider_client: The client for interacting with the OAuth provider.
        user_link_repository: The store of user links.

    Returns:
        The stored user link.

    Raises:
        ProviderStateMismatchError: If the state does not match.
        ProviderExchangeCodeError: If there's an error during the code exchange.
        UserLinkStoreError: If the user link cannot be stored.
    """
    if not secrets.compare_digest(state.encode(), expected_state.encode()):
        raise ProviderStateMismatchError("State does not match the authorization request")

    try:
        token_payload = await provider_client.exchange_code_for_token(code)
    except Exception as e:
        raise ProviderExchangeCodeError() from e

    user_link = user_link_from_tokens(identity, token_payload)

    try:
        user_link, created = await user_link_repository.upsert(user_link)
    except Exception as e:
        raise UserLinkStoreError() from e

    logger.info("Slack user '%s' %s", user_link.chat_user_id, "linked" if created else "re-linked")

    return user_link
