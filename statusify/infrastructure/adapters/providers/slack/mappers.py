from statusify.domain.schemas.auth import ChatTokenPayload
from statusify.infrastructure.adapters.providers.slack.schemas import SlackOAuthAccess


def to_domain_chat_token(slack_access: SlackOAuthAccess) -> ChatTokenPayload | None:
    """Extracts the authorizing user token from an `oauth.v2.access` body.

    Returns None when Slack did not grant a user token.
    """
    authed_user = slack_access.authed_user
    if authed_user is None or not authed_user.id or not authed_user.access_token:
        return None

    return ChatTokenPayload(
        user_id=authed_user.id,
        access_token=authed_user.access_token,
        token_type=authed_user.token_type,
        scope=authed_user.scope,
        team_id=slack_access.team.id if slack_access.team else None,
    )
