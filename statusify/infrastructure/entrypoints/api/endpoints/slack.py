from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response

from statusify.application.services.session_bridge import SessionBridge
from statusify.application.use_cases.chat_oauth_callback import chat_oauth_callback
from statusify.domain.exceptions import ChatExchangeCodeError
from statusify.domain.exceptions import StatusifyError
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.infrastructure.entrypoints.api.dependencies import get_authorization_state
from statusify.infrastructure.entrypoints.api.dependencies import get_session_bridge
from statusify.infrastructure.entrypoints.api.dependencies import get_slack_client
from statusify.infrastructure.entrypoints.api.dependencies import get_spotify_client
from statusify.infrastructure.entrypoints.api.responses import redirect_with_carriers
from statusify.infrastructure.entrypoints.api.responses import write_exception

router = APIRouter()


@router.get("/callback", name="slack_callback")
async def slack_callback(
    code: str | None = None,
    error: str | None = None,
    slack_client: ChatOAuthClientPort = Depends(get_slack_client),
    spotify_client: ProviderOAuthClientPort = Depends(get_spotify_client),
    session_bridge: SessionBridge = Depends(get_session_bridge),
    authorization_state: str = Depends(get_authorization_state),
) -> Response:
    try:
        if error:
            raise ChatExchangeCodeError(f"OAuth error: {error}")
        if not code:
            raise ChatExchangeCodeError("No authorization code received")

        handoff = await chat_oauth_callback(
            code=code,
            state=authorization_state,
            chat_client=slack_client,
            provider_client=spotify_client,
            session_bridge=session_bridge,
        )
    except StatusifyError as e:
        return write_exception(e, context="Slack callback")

    return redirect_with_carriers(str(handoff.authorization_url), handoff.carriers)
