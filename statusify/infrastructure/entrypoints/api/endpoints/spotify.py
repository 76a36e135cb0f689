from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request
from fastapi import Response
from fastapi.responses import FileResponse

from statusify import STATIC_DIR
from statusify.application.services.session_bridge import SessionBridge
from statusify.application.use_cases.provider_oauth_callback import oauth_callback
from statusify.domain.exceptions import ProviderExchangeCodeError
from statusify.domain.exceptions import StatusifyError
from statusify.domain.ports.providers.client import ProviderOAuthClientPort
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.infrastructure.entrypoints.api.dependencies import get_authorization_state
from statusify.infrastructure.entrypoints.api.dependencies import get_session_bridge
from statusify.infrastructure.entrypoints.api.dependencies import get_spotify_client
from statusify.infrastructure.entrypoints.api.dependencies import get_user_link_repository
from statusify.infrastructure.entrypoints.api.responses import write_exception

router = APIRouter()

COMPLETED_PAGE = STATIC_DIR / "completed" / "index.html"


@router.get("/callback", name="spotify_callback")
async def spotify_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    session_bridge: SessionBridge = Depends(get_session_bridge),
    spotify_client: ProviderOAuthClientPort = Depends(get_spotify_client),
    user_link_repository: UserLinkRepository = Depends(get_user_link_repository),
    authorization_state: str = Depends(get_authorization_state),
) -> Response:
    try:
        identity = session_bridge.read(request.cookies)

        if error:
            raise ProviderExchangeCodeError(f"OAuth error: {error}")
        if not code:
            raise ProviderExchangeCodeError("No authorization code received")

        await oauth_callback(
            code=code,
            state=state or "",
            expected_state=authorization_state,
            identity=identity,
            provider_client=spotify_client,
            user_link_repository=user_link_repository,
        )
    except StatusifyError as e:
        return write_exception(e, context="Spotify callback")

    return FileResponse(COMPLETED_PAGE, media_type="text/html")
