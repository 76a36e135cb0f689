import httpx

from pydantic import HttpUrl

from statusify.domain.exceptions import ChatExchangeCodeError
from statusify.domain.ports.providers.client import ChatOAuthClientPort
from statusify.domain.schemas.auth import ChatTokenPayload
from statusify.infrastructure.adapters.providers.slack.mappers import to_domain_chat_token
from statusify.infrastructure.adapters.providers.slack.schemas import SlackOAuthAccess


class SlackOAuthClientAdapter(ChatOAuthClientPort):
    """An asynchronous client for Slack's OAuth v2 code exchange.

    Slack reports a refused code with a 200 and `ok: false`, which is told apart
    from transport errors, non-2xx answers and undecodable bodies (these are
    left to propagate as `httpx`/`pydantic` errors).
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_endpoint: HttpUrl,
        redirect_uri: HttpUrl | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        self._token_endpoint = token_endpoint
        self._client: httpx.AsyncClient = httpx.AsyncClient(timeout=timeout)

    @property
    def token_endpoint(self) -> HttpUrl:
        return self._token_endpoint

    async def exchange_code_for_token(self, code: str) -> ChatTokenPayload:
        data = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        if self.redirect_uri is not None:
            data["redirect_uri"] = str(self.redirect_uri)

        response = await self._client.post(
            str(self.token_endpoint),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data=data,
        )
        response.raise_for_status()

        slack_access = SlackOAuthAccess.model_validate_json(response.content)
        if not slack_access.ok:
            raise ChatExchangeCodeError(f"Slack refused the code: {slack_access.error}")

        chat_token = to_domain_chat_token(slack_access)
        if chat_token is None:
            raise ChatExchangeCodeError("Slack did not grant a user token")

        return chat_token

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SlackOAuthClientAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
