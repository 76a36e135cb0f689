from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.entities.user import UserLink
from statusify.domain.schemas.auth import OAuthProviderTokenPayload


def user_link_from_tokens(identity: ChatIdentity, token_payload: OAuthProviderTokenPayload) -> UserLink:
    return UserLink(
        chat_user_id=identity.chat_user_id,
        chat_access_token=identity.chat_access_token,
        music_access_token=token_payload.access_token,
        music_refresh_token=token_payload.refresh_token,
        music_token_type=token_payload.token_type,
        music_expires_at=token_payload.expires_at,
    )
