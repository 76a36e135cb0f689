from pydantic import BaseModel


class SlackAuthedUser(BaseModel):
    id: str
    access_token: str | None = None
    scope: str | None = None
    token_type: str | None = None


class SlackTeam(BaseModel):
    id: str
    name: str | None = None


class SlackOAuthAccess(BaseModel):
    """Body of the `oauth.v2.access` method.

    See: https://api.slack.com/methods/oauth.v2.access
    """

    # Only an explicit `ok: false` is a refusal.
    ok: bool = True
    error: str | None = None

    app_id: str | None = None
    authed_user: SlackAuthedUser | None = None
    team: SlackTeam | None = None
