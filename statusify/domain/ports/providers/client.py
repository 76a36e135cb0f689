from abc import ABC
from abc import abstractmethod

from pydantic import HttpUrl

from statusify.domain.schemas.auth import ChatTokenPayload
from statusify.domain.schemas.auth import OAuthProviderTokenPayload


class ChatOAuthClientPort(ABC):
    """A port defining the contract for the chat platform OAuth client.

    The chat platform is the entry point of the linking flow: it only needs to
    turn the authorization code it redirected with into the user's identity
    and access token.
    """

    @property
    @abstractmethod
    def token_endpoint(self) -> HttpUrl:
        """The URL the authorization code is exchanged against."""
        ...

    @abstractmethod
    async def exchange_code_for_token(self, code: str) -> ChatTokenPayload:
        """Exchanges an authorization code for the user's identity and token.

        Args:
            code: The authorization code received on the chat platform callback.

        Returns:
            The identity of the authorizing user and its access token.

        Raises:
            ChatExchangeCodeError: If the platform answered but refused the code.
            Any transport or decoding error otherwise.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Closes the client and cleans up any underlying resources, like HTTP sessions."""
        ...


class ProviderOAuthClientPort(ABC):
    """A port defining the contract for a stateless OAuth client for a music provider.

    This interface abstracts the details of interacting with a provider's OAuth2
    endpoints, ensuring that the application's domain logic remains decoupled from
    specific provider implementations.
    """

    @property
    @abstractmethod
    def token_endpoint(self) -> HttpUrl:
        """The URL for token-related operations (exchange)."""
        ...

    @abstractmethod
    def get_authorization_url(self, state: str) -> HttpUrl:
        """Generates the provider's OAuth authorization URL.

        Args:
            state: A string echoed back by the provider to prevent CSRF attacks.

        Returns:
            The full authorization URL to redirect the user to.
        """
        ...

    @abstractmethod
    async def exchange_code_for_token(self, code: str) -> OAuthProviderTokenPayload:
        """Exchanges an authorization code for an access token.

        Args:
            code: The authorization code received from the provider's callback.

        Returns:
            A payload containing the access token, refresh token, and expiry information.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Closes the client and cleans up any underlying resources, like HTTP sessions."""
        ...
